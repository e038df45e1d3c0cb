from collections import deque

DEFAULT_CHUNK_SIZE = 8192


class InputBuffer:
    """Forward-only character source over a ``str`` or a text stream.

    Chunks are pulled from the stream lazily, so a large document is never
    held in memory as a whole. ``peek(offset)`` looks ahead without consuming.
    """

    __slots__ = ("_buffers", "_chunk_size", "_exhausted", "_stream")

    def __init__(self, source, chunk_size=DEFAULT_CHUNK_SIZE):
        self._buffers = deque()
        self._chunk_size = chunk_size
        if isinstance(source, str):
            self._stream = None
            self._exhausted = True
            self.push_back(source)
        else:
            self._stream = source
            self._exhausted = False

    def push_back(self, chunk):
        if chunk:
            self._buffers.append([chunk, 0])

    def is_empty(self):
        return self.peek() is None

    def peek(self, offset=0):
        chars = self._peek_chars(offset + 1)
        if len(chars) <= offset:
            return None
        return chars[offset]

    def next(self):
        self._discard_empty_prefix()
        if not self._buffers and not self._fill():
            return None
        chunk, index = self._buffers[0]
        char = chunk[index]
        index += 1
        if index >= len(chunk):
            self._buffers.popleft()
        else:
            self._buffers[0][1] = index
        return char

    def _fill(self):
        # Read errors from the stream propagate to the caller untouched.
        if self._exhausted:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._exhausted = True
            return False
        self.push_back(chunk)
        return True

    def _peek_chars(self, count):
        self._discard_empty_prefix()
        result = []
        for chunk, index in self._buffers:
            upper = len(chunk)
            while index < upper and len(result) < count:
                result.append(chunk[index])
                index += 1
            if len(result) >= count:
                return result
        while len(result) < count and self._fill():
            chunk = self._buffers[-1][0]
            result.extend(chunk[: count - len(result)])
        return result

    def _discard_empty_prefix(self):
        while self._buffers and self._buffers[0][1] >= len(self._buffers[0][0]):
            self._buffers.popleft()
