import os
import traceback

from flask import Flask, request, jsonify, send_file, url_for
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename

from filezipper import (
    EmptyInputError,
    MalformedContainerError,
    TruncatedStreamError,
    compress_file,
    decompress_file,
)

# -----------------------------------------------------------
# PATH CONFIGURATION
# -----------------------------------------------------------
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.environ.get("FILEZIPPER_DATA_DIR", os.path.join(BASE_DIR, "data"))
MAX_UPLOAD_MB = int(os.environ.get("FILEZIPPER_MAX_UPLOAD_MB", "64"))

COMPRESSED_EXT = ".huff"

# -----------------------------------------------------------
# FLASK APP SETUP
# -----------------------------------------------------------
app = Flask(__name__)
app.config["DATA_DIR"] = DATA_DIR
app.config["MAX_CONTENT_LENGTH"] = MAX_UPLOAD_MB * 1024 * 1024
CORS(app)

# Errors caused by the uploaded content rather than by the server
CLIENT_ERRORS = (EmptyInputError, MalformedContainerError, TruncatedStreamError)

# -----------------------------------------------------------
# HELPER FUNCTIONS
# -----------------------------------------------------------
def storage_dir():
    data_dir = app.config["DATA_DIR"]
    os.makedirs(data_dir, exist_ok=True)
    return data_dir


def save_upload(file):
    """Stores an uploaded file under a safe name and returns (name, path)."""
    filename = secure_filename(file.filename or "")
    if not filename:
        return None, None
    input_path = os.path.join(storage_dir(), filename)
    file.save(input_path)
    return filename, input_path


def error_response(message, status):
    return jsonify({"success": False, "error": message}), status

# -----------------------------------------------------------
# ROUTES
# -----------------------------------------------------------
@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/compress_file", methods=["POST"])
def compress_file_route():
    try:
        file = request.files.get("file")
        if not file:
            return error_response("No file uploaded", 400)

        filename, input_path = save_upload(file)
        if not filename:
            return error_response("Invalid file name", 400)

        compressed_filename = filename + COMPRESSED_EXT
        compressed_path = os.path.join(storage_dir(), compressed_filename)
        report = compress_file(input_path, compressed_path)

        return jsonify({
            "success": True,
            "filename": filename,
            "compressed_filename": compressed_filename,
            "original_size": report["original_size"],
            "compressed_size": report["compressed_size"],
            "saved": report["saved"],
            "saved_percent": report["saved_percent"],
            "download_url": url_for("download", filename=compressed_filename),
        })

    except CLIENT_ERRORS as e:
        return error_response(str(e), 400)
    except RequestEntityTooLarge:
        raise
    except Exception as e:
        print("Error in /compress_file:", e)
        traceback.print_exc()
        return error_response("Internal server error", 500)


@app.route("/decompress_file", methods=["POST"])
def decompress_file_route():
    try:
        file = request.files.get("file")
        if not file:
            return error_response("No file uploaded", 400)

        filename = secure_filename(file.filename or "")
        if not filename.endswith(COMPRESSED_EXT) or filename == COMPRESSED_EXT:
            return error_response("Invalid file type", 400)

        _, input_path = save_upload(file)

        # Keep the original filename by dropping ".huff"
        output_filename = filename[: -len(COMPRESSED_EXT)]
        output_path = os.path.join(storage_dir(), output_filename)
        report = decompress_file(input_path, output_path)

        return jsonify({
            "success": True,
            "original_huff": filename,
            "decompressed_file": output_filename,
            "original_size": report["original_size"],
            "download_url": url_for("download", filename=output_filename),
        })

    except CLIENT_ERRORS as e:
        return error_response(str(e), 400)
    except RequestEntityTooLarge:
        raise
    except Exception as e:
        print("Error in /decompress_file:", e)
        traceback.print_exc()
        return error_response("Internal server error", 500)


@app.route("/download/<filename>")
def download(filename):
    file_path = os.path.join(storage_dir(), secure_filename(filename))
    if not os.path.isfile(file_path):
        return "File not found", 404
    return send_file(
        file_path,
        as_attachment=True,
        download_name=filename,
        mimetype="application/octet-stream",
    )


@app.errorhandler(RequestEntityTooLarge)
def upload_too_large(e):
    limit = app.config["MAX_CONTENT_LENGTH"]
    return error_response(f"Upload exceeds the {limit} byte limit", 413)

# -----------------------------------------------------------
if __name__ == "__main__":
    app.run(debug=True)
