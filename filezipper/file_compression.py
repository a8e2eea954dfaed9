import io
import os

from filezipper.bitstream import END_OF_DATA, BitReader, BitWriter
from filezipper.container import ContainerHeader, read_header, write_header
from filezipper.errors import MalformedContainerError, TruncatedStreamError
from filezipper.huffman import build_huffman_tree, count_frequencies, generate_codes


### COMPRESSION ###
def compress_stream(data, out):
    """
    Writes the container for ``data`` to the binary stream ``out``.
    Returns the number of bytes written.
    """
    # Pass 1: count every byte, fails on empty input before anything is written
    frequencies, total = count_frequencies(data)
    root = build_huffman_tree(frequencies)
    huffman_codes = generate_codes(root)

    header = ContainerHeader(total, frequencies)
    write_header(out, header)

    # Pass 2: encode the same buffer
    writer = BitWriter(out)
    for byte in data:
        writer.write_code(huffman_codes[byte])
    writer.flush()

    return header.size + (writer.bits_written + 7) // 8


def compress(data):
    """Compresses ``data`` and returns the whole container as bytes."""
    out = io.BytesIO()
    compress_stream(bytes(data), out)
    return out.getvalue()


### DECOMPRESSION ###
def decompress_stream(source):
    """Reads one container from the binary stream ``source`` and returns the original bytes."""
    header = read_header(source)
    original_size = header.original_size

    # Same frequencies and same tie-break give back the compressor's tree
    root = build_huffman_tree(header.frequencies)

    reader = BitReader(source)
    decoded = bytearray()
    current_node = root

    while len(decoded) < original_size:
        bit = reader.read_bit()
        if bit == END_OF_DATA:
            raise TruncatedStreamError(len(decoded), original_size)

        # Single-symbol containers use the code "0" for every byte
        if root.is_leaf:
            if bit != 0:
                raise MalformedContainerError(
                    "Unexpected 1 bit in a single-symbol container."
                )
            decoded.append(root.byte)
            continue

        current_node = current_node.left if bit == 0 else current_node.right
        if current_node.is_leaf:
            decoded.append(current_node.byte)
            current_node = root

    # Only padding bits may follow the last code
    if source.read(1):
        raise MalformedContainerError("Unexpected data after the encoded body.")

    return bytes(decoded)


def decompress(blob):
    """Decompresses a container held in memory."""
    return decompress_stream(io.BytesIO(blob))


### FILE HELPERS ###
def _write_atomically(output_path, payload):
    # Write next to the target then rename, so a failure never leaves a partial file
    temp_path = output_path + ".part"
    try:
        with open(temp_path, "wb") as output_file:
            output_file.write(payload)
        os.replace(temp_path, output_path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise


def compress_file(input_path, output_path):
    """
    Compresses ``input_path`` into ``output_path``.
    Returns a dict with the original and compressed sizes.
    """
    with open(input_path, "rb") as input_file:
        data = input_file.read()

    compressed = compress(data)
    _write_atomically(output_path, compressed)

    original_size = len(data)
    compressed_size = len(compressed)
    saved = original_size - compressed_size
    return {
        "original_size": original_size,
        "compressed_size": compressed_size,
        "saved": saved,
        "saved_percent": round(saved / original_size * 100, 2),
    }


def decompress_file(input_path, output_path):
    """Restores the file stored in the container at ``input_path``."""
    with open(input_path, "rb") as input_file:
        blob = input_file.read()

    data = decompress(blob)
    _write_atomically(output_path, data)

    return {
        "compressed_size": len(blob),
        "original_size": len(data),
    }
