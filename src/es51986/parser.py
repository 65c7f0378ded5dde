"""ES51986 stream decoder for splitting a serial byte stream into frames."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable, Iterable
from enum import Enum, auto

from .exceptions import LengthError, ParseError
from .protocol.common import CR, FRAME_LENGTH, LF
from .protocol.frame import Record

DecodeResult = Record | ParseError


class DecoderState(Enum):
    IDLE = auto()
    AFTER_CR = auto()


class StreamDecoder:
    """Stateful framer turning raw serial bytes into decoded records.

    The decoder accepts bare CR, bare LF and CRLF line terminators. A CR
    decodes the buffered frame immediately; an LF directly following it is
    swallowed as the second half of the terminator pair. Every terminator
    triggers a decode attempt, so a short or long buffer is reported as a
    LengthError by the frame decoder.

    The buffer never holds more than one frame. When a tenth byte arrives
    before any terminator, the oldest bytes are dropped and a LengthError
    carrying the untrimmed length is emitted, letting the decoder
    resynchronize on the next terminator.

    Results are independent of how the input is split into chunks: feeding
    bytes one at a time or all at once yields the same sequence.

    One decoder instance per serial connection; access is not thread-safe.
    """

    # Public attributes
    state: DecoderState

    # Private attributes
    _buffer: bytearray
    _logger: logging.Logger

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize decoder in the IDLE state with an empty buffer.

        Args:
            logger: Logger for decode diagnostics (default: module logger)
        """
        self._logger = logger or logging.getLogger(__name__)
        self.state = DecoderState.IDLE
        self._buffer = bytearray()

    def reset(self) -> None:
        """Discard buffered bytes and return to the IDLE state."""
        self.state = DecoderState.IDLE
        self._buffer.clear()

    @property
    def buffered(self) -> bytes:
        """Bytes received since the last frame boundary."""
        return bytes(self._buffer)

    def _decode_buffer(self) -> DecodeResult:
        data = bytes(self._buffer)
        self._buffer.clear()

        try:
            record = Record.from_bytes(data)
        except ParseError as e:
            self._logger.debug("Rejected frame %r: %s", data, e)
            return e

        self._logger.debug("Decoded frame %r", data)
        return record

    def _append(self, byte: int) -> DecodeResult | None:
        self._buffer.append(byte)

        length = len(self._buffer)
        if length <= FRAME_LENGTH:
            return None

        del self._buffer[: length - FRAME_LENGTH]
        self._logger.debug("Buffer overflow (%d bytes), dropping oldest bytes", length)
        return LengthError(length)

    def feed(self, byte: int) -> DecodeResult | None:
        """Feed one byte into the decoder.

        Args:
            byte: Next byte from the serial stream (0-255)

        Returns:
            A Record or ParseError if this byte completed a frame boundary or
            overflowed the buffer, otherwise None
        """
        if self.state is DecoderState.AFTER_CR:
            self.state = DecoderState.IDLE
            if byte == LF:
                self._buffer.clear()
                return None
            return self._append(byte)

        if byte == CR:
            self.state = DecoderState.AFTER_CR
            return self._decode_buffer()

        if byte == LF:
            return self._decode_buffer()

        return self._append(byte)

    def feed_all(self, data: Iterable[int]) -> list[DecodeResult]:
        """Feed a chunk of bytes and collect all results in order.

        Args:
            data: Bytes from the serial stream, any chunk size

        Returns:
            Records and ParseErrors in the order their boundaries were seen
        """
        results: list[DecodeResult] = []
        for byte in data:
            result = self.feed(byte)
            if result is not None:
                results.append(result)

        return results

    async def decode_async(
        self,
        get_next_bytes: Callable[[int], Awaitable[bytes]],
        chunk_size: int = 64,
    ) -> AsyncGenerator[DecodeResult]:
        """Decode results from an async byte source until it is exhausted.

        Args:
            get_next_bytes: Async function returning up to n bytes, or empty
                bytes at end of stream (e.g. asyncio.StreamReader.read)
            chunk_size: Maximum bytes requested per call

        Yields:
            Records and ParseErrors in stream order

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        while chunk := await get_next_bytes(chunk_size):
            for result in self.feed_all(chunk):
                yield result
