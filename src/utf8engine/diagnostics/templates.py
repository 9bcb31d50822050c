"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place, one method per error case
    """

    _RFC3629 = "https://datatracker.ietf.org/doc/html/rfc3629"
    _RFC2781 = "https://datatracker.ietf.org/doc/html/rfc2781"

    @staticmethod
    def invalid_lead(octet: int, position: int) -> Diagnostic:
        """Byte cannot start a UTF-8 sequence.

        Args:
            octet: The offending byte
            position: Offset of the byte

        Returns:
            Diagnostic for INVALID_LEAD
        """
        msg = f"Invalid UTF-8 lead byte 0x{octet:02X} at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Lead bytes are 0x00-0x7F, 0xC0-0xDF, 0xE0-0xEF or 0xF0-0xF7",
            help_url=f"{ErrorTemplate._RFC3629}#section-3",
            octet=octet,
        )

    @staticmethod
    def not_enough_room(position: int, expected: int, available: int) -> Diagnostic:
        """Buffer ends before the sequence is complete.

        Args:
            position: Offset of the lead byte
            expected: Sequence length declared by the lead byte
            available: Bytes remaining from the lead byte to the end bound

        Returns:
            Diagnostic for NOT_ENOUGH_ROOM
        """
        msg = (
            f"Truncated UTF-8 sequence at offset {position}: "
            f"expected {expected} bytes, {available} available"
        )
        return Diagnostic(
            code=DiagnosticCode.NOT_ENOUGH_ROOM,
            message=msg,
            span=ByteSpan(position, position + available),
            hint="The buffer was cut in the middle of a character",
            help_url=f"{ErrorTemplate._RFC3629}#section-3",
        )

    @staticmethod
    def empty_range(position: int) -> Diagnostic:
        """Nothing left to decode at the requested position.

        Args:
            position: Offset equal to the end bound

        Returns:
            Diagnostic for NOT_ENOUGH_ROOM
        """
        msg = f"No bytes left to decode at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.NOT_ENOUGH_ROOM,
            message=msg,
            span=ByteSpan(position, position),
        )

    @staticmethod
    def at_range_start(position: int) -> Diagnostic:
        """Cannot step backward from the start of a range.

        Args:
            position: Offset equal to the range start

        Returns:
            Diagnostic for NOT_ENOUGH_ROOM
        """
        msg = f"Cannot step back from range start at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.NOT_ENOUGH_ROOM,
            message=msg,
            span=ByteSpan(position, position),
        )

    @staticmethod
    def incomplete_sequence(
        octet: int, position: int, expected: int, bad_offset: int
    ) -> Diagnostic:
        """Continuation byte missing inside a multi-byte sequence.

        Args:
            octet: The lead byte of the sequence
            position: Offset of the lead byte
            expected: Sequence length declared by the lead byte
            bad_offset: Offset of the byte that is not a continuation byte

        Returns:
            Diagnostic for INCOMPLETE_SEQUENCE
        """
        msg = (
            f"Incomplete {expected}-byte UTF-8 sequence at offset {position}: "
            f"byte at offset {bad_offset} is not a continuation byte"
        )
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_SEQUENCE,
            message=msg,
            span=ByteSpan(position, bad_offset + 1),
            hint="Continuation bytes are 0x80-0xBF",
            help_url=f"{ErrorTemplate._RFC3629}#section-3",
            octet=octet,
        )

    @staticmethod
    def overlong_sequence(
        octet: int, position: int, length: int, code_point: int
    ) -> Diagnostic:
        """Sequence uses more bytes than its code point requires.

        Args:
            octet: The lead byte of the sequence
            position: Offset of the lead byte
            length: Length of the encoded sequence
            code_point: The decoded code point

        Returns:
            Diagnostic for OVERLONG_SEQUENCE
        """
        msg = (
            f"Overlong {length}-byte encoding of U+{code_point:04X} "
            f"at offset {position}"
        )
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_SEQUENCE,
            message=msg,
            span=ByteSpan(position, position + length),
            hint="Encode the code point with its shortest form",
            help_url=f"{ErrorTemplate._RFC3629}#section-10",
            octet=octet,
            code_point=code_point,
        )

    @staticmethod
    def invalid_code_point(
        code_point: int, position: int | None = None, length: int = 0
    ) -> Diagnostic:
        """Surrogate or out-of-range code point.

        Args:
            code_point: The offending value
            position: Offset of the sequence that decoded to it (None when
                the value came from the caller rather than a buffer)
            length: Length of that sequence

        Returns:
            Diagnostic for INVALID_CODE_POINT
        """
        if code_point < 0:
            msg = f"Invalid code point {code_point}: negative value"
        else:
            msg = f"Invalid code point U+{code_point:04X}"
        if position is not None:
            msg = f"{msg} at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_POINT,
            message=msg,
            span=ByteSpan(position, position + length) if position is not None else None,
            hint="Code points are 0-0x10FFFF excluding surrogates 0xD800-0xDFFF",
            help_url=f"{ErrorTemplate._RFC3629}#section-3",
            code_point=code_point,
        )

    @staticmethod
    def missing_lead_byte(octet: int, position: int) -> Diagnostic:
        """Walking backward reached the range start on a continuation byte.

        Args:
            octet: The continuation byte found at the range start
            position: Offset of the range start

        Returns:
            Diagnostic for INVALID_LEAD
        """
        msg = f"No lead byte before continuation byte 0x{octet:02X} at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="The range starts in the middle of a character",
            help_url=f"{ErrorTemplate._RFC3629}#section-3",
            octet=octet,
        )

    @staticmethod
    def invalid_utf16(unit: int, position: int) -> Diagnostic:
        """Lone or mismatched surrogate.

        Args:
            unit: The offending 16-bit unit
            position: Offset of the unit

        Returns:
            Diagnostic for INVALID_UTF16
        """
        msg = f"Invalid UTF-16 unit 0x{unit:04X} at offset {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_UTF16,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="A lead surrogate 0xD800-0xDBFF must be followed by a trail 0xDC00-0xDFFF",
            help_url=f"{ErrorTemplate._RFC2781}#section-2.2",
            unit=unit,
        )

    @staticmethod
    def iterator_out_of_range(pos: int, range_start: int, range_end: int) -> Diagnostic:
        """Iterator constructed outside its bounds.

        Args:
            pos: Requested position
            range_start: Inclusive range start
            range_end: Exclusive range end

        Returns:
            Diagnostic for ITERATOR_OUT_OF_RANGE
        """
        msg = f"Invalid utf-8 iterator position {pos} for range [{range_start}, {range_end}]"
        return Diagnostic(
            code=DiagnosticCode.ITERATOR_OUT_OF_RANGE,
            message=msg,
            hint="The position must satisfy range_start <= pos <= range_end <= len(buffer)",
        )

    @staticmethod
    def iterator_range_mismatch(
        left: tuple[int, int], right: tuple[int, int]
    ) -> Diagnostic:
        """Iterators over different ranges were compared.

        Args:
            left: (range_start, range_end) of the left operand
            right: (range_start, range_end) of the right operand

        Returns:
            Diagnostic for ITERATOR_RANGE_MISMATCH
        """
        msg = (
            "Comparing utf-8 iterators defined with different ranges: "
            f"[{left[0]}, {left[1]}) vs [{right[0]}, {right[1]})"
        )
        return Diagnostic(
            code=DiagnosticCode.ITERATOR_RANGE_MISMATCH,
            message=msg,
            hint="Only compare iterators created over the same buffer and bounds",
        )

    @staticmethod
    def input_too_large(size: int, limit: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Actual input size
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input of {size} bytes exceeds limit of {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            hint="Raise max_input_size or process the input in chunks",
        )
