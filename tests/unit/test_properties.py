"""Property-based tests using Hypothesis for codec invariants."""

from hypothesis import given, strategies as st, settings

from hexcodec import HEX_CHARS, HEX_WHITESPACE, decode_hex, encode_hex, InvalidHexLength


hex_digit = st.sampled_from("0123456789abcdefABCDEF")
whitespace = st.text(alphabet=HEX_WHITESPACE, max_size=3)


class TestCodecProperties:
    """Property-based tests for encode/decode invariants."""

    @given(st.binary())
    def test_round_trip(self, data: bytes):
        """Property: decoding an encoding gives back the input."""
        assert decode_hex(encode_hex(data)).value == data

    @given(st.binary())
    def test_length_law(self, data: bytes):
        """Property: output is exactly twice the input length."""
        assert len(encode_hex(data)) == 2 * len(data)

    @given(st.binary())
    def test_alphabet_law(self, data: bytes):
        """Property: output only uses lowercase hex digits."""
        assert set(encode_hex(data)) <= set(HEX_CHARS)

    @given(st.binary())
    def test_case_insensitive(self, data: bytes):
        """Property: upper-casing valid hex does not change the decoded bytes."""
        text = encode_hex(data)
        assert decode_hex(text.upper()) == decode_hex(text)

    @given(st.binary(min_size=1), st.data())
    @settings(max_examples=50)
    def test_whitespace_transparent(self, data: bytes, extra):
        """Property: whitespace anywhere in the digits is ignored."""
        text = encode_hex(data)
        spaced = "".join(char + extra.draw(whitespace) for char in text)
        assert decode_hex(extra.draw(whitespace) + spaced).value == data

    @given(st.lists(hex_digit).filter(lambda digits: len(digits) % 2 == 1), whitespace)
    def test_odd_digit_count_fails(self, digits, padding: str):
        """Property: an odd number of hex digits always fails with InvalidLength."""
        result = decode_hex(padding.join(digits))
        assert result.error == InvalidHexLength()

    @given(st.text(alphabet=st.characters(exclude_characters="0123456789abcdefABCDEF \r\n\t"), min_size=1, max_size=1), st.binary(max_size=8))
    def test_invalid_character_position(self, bad: str, prefix: bytes):
        """Property: a bad character after valid hex is reported at its offset."""
        text = encode_hex(prefix) + bad + "00"
        error = decode_hex(text).error
        assert error.character == bad
        assert error.position == 2 * len(prefix)
