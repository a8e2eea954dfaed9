import sys

from filezipper.errors import FileZipperError
from filezipper.file_compression import compress_file, decompress_file

PROG = "filezipper"


def usage():
    return (
        "Usage:\n"
        f"  {PROG} compress <input> <output>\n"
        f"  {PROG} decompress <input> <output>\n"
    )


def run_compress(input_path, output_path):
    report = compress_file(input_path, output_path)
    print(f"Compressed {report['original_size']} bytes -> {report['compressed_size']} bytes")


def run_decompress(input_path, output_path):
    report = decompress_file(input_path, output_path)
    print(f"Decompressed {report['original_size']} bytes.")


COMMANDS = {
    "compress": run_compress,
    "decompress": run_decompress,
}


def main(argv=None):
    """Entry point, returns the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != 3:
        print(usage(), end="")
        return 1

    mode, input_path, output_path = argv
    command = COMMANDS.get(mode)
    if command is None:
        print(f"Unknown mode: {mode}", file=sys.stderr)
        print(usage(), end="")
        return 1

    try:
        command(input_path, output_path)
    except (FileZipperError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
