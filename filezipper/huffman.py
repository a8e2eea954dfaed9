import heapq

from filezipper.errors import EmptyInputError

# Number of distinct byte values a frequency table covers.
SYMBOL_COUNT = 256


### HUFFMAN NODE CLASS ###
class HuffmanNode:
    """Represents a node in the Huffman tree."""
    def __init__(self, byte=None, freq=0, left=None, right=None, rank=0):
        # byte: The actual byte value (0-255). None for internal nodes.
        self.byte = byte
        # freq: The frequency of the byte or the combined frequency of its children.
        self.freq = freq
        # left/right: Child nodes, both None for a leaf.
        self.left = left
        self.right = right
        # rank: Secondary sort key. Leaves use their byte value, internal
        # nodes count up from SYMBOL_COUNT in creation order.
        self.rank = rank

    @property
    def is_leaf(self):
        return self.byte is not None

    # heapq compares nodes on (freq, rank). The pair is unique per node so
    # equal frequencies always pop in the same order.
    def __lt__(self, other):
        return (self.freq, self.rank) < (other.freq, other.rank)

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(byte={self.byte}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq}, rank={self.rank})"


### FREQUENCY COUNTING ###
def count_frequencies(data):
    """
    Counts how often each byte value occurs in ``data``.
    Returns a 256-entry frequency list and the total byte count.
    """
    frequencies = [0] * SYMBOL_COUNT
    for byte in data:
        frequencies[byte] += 1

    total = len(data)
    if total == 0:
        raise EmptyInputError()
    return frequencies, total


### TREE AND CODE GENERATION ###
def build_huffman_tree(frequencies):
    """
    Builds the Huffman tree for a 256-entry frequency list and returns its root.

    Ties between equal frequencies are broken by rank, so building twice from
    the same table always gives the same tree.
    """
    # 1. One leaf per byte value that actually occurs, in byte order
    priority_queue = [
        HuffmanNode(byte=byte, freq=freq, rank=byte)
        for byte, freq in enumerate(frequencies)
        if freq > 0
    ]
    if not priority_queue:
        raise EmptyInputError("Frequency table has no non-zero entries.")
    heapq.heapify(priority_queue)

    # A single distinct byte is its own root, there is nothing to merge
    if len(priority_queue) == 1:
        return priority_queue[0]

    # 2. Repeatedly merge the two lowest nodes; the first one popped goes left
    next_rank = SYMBOL_COUNT
    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue)
        right = heapq.heappop(priority_queue)

        parent = HuffmanNode(
            freq=left.freq + right.freq, left=left, right=right, rank=next_rank
        )
        next_rank += 1
        heapq.heappush(priority_queue, parent)

    return priority_queue[0]


def iter_leaf_paths(root, prefix=""):
    """Yields ``(leaf, path)`` for every leaf below ``root``, left to right."""
    if root.is_leaf:
        yield root, prefix
        return
    yield from iter_leaf_paths(root.left, prefix + "0")
    yield from iter_leaf_paths(root.right, prefix + "1")


def generate_codes(root):
    """
    Maps every byte value in the tree to its bit-string code.
    A tree made of a single leaf gets the code "0".
    """
    if root.is_leaf:
        return {root.byte: "0"}

    huffman_codes = {}
    for leaf, path in iter_leaf_paths(root):
        huffman_codes[leaf.byte] = path
    return huffman_codes


def count_internal_nodes(root):
    if root.is_leaf:
        return 0
    return 1 + count_internal_nodes(root.left) + count_internal_nodes(root.right)
