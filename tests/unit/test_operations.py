"""Unit tests for the operation library."""

import pytest

from cipherline.operations import (
    a1z26_decode,
    a1z26_encode,
    caesar,
    key_offsets,
    rail_fence_decode,
    rail_fence_encode,
    replace_text,
    reverse_text,
    rot13,
    title_case,
    toggle_case,
    transform_case,
    vigenere,
    zigzag_pattern,
)

MIXED_TEXT = "Hello, Wörld! 123 Привет _x_"


# ============================================================================
# Caesar / ROT13
# ============================================================================


class TestCaesar:
    """Tests for the Caesar shift."""

    def test_encode_hello_world(self):
        assert caesar("Hello World", 3, "encode", True) == "Khoor Zruog"

    def test_decode_hello_world(self):
        assert caesar("Khoor Zruog", 3, "decode", True) == "Hello World"

    def test_without_preserve_case_lowercases(self):
        assert caesar("Hello World", 3, "encode", False) == "khoor zruog"

    def test_shift_wraps_modulo_26(self):
        assert caesar("abc", 29) == caesar("abc", 3)
        assert caesar("a", 100) == "w"

    def test_shift_26_is_identity(self):
        assert caesar("Attack", 26) == "Attack"
        assert caesar("Attack", 26, "decode") == "Attack"

    @pytest.mark.parametrize("shift", [0, 1, 13, 25, 26, 57, 100])
    def test_round_trip(self, shift):
        text = "TheQuickBrownFoxJumpsOverTheLazyDog"
        assert caesar(caesar(text, shift, "encode"), shift, "decode") == text

    def test_non_letters_pass_through(self):
        assert caesar("123 !? é", 5) == "123 !? é"

    def test_empty_text(self):
        assert caesar("", 3) == ""


class TestRot13:
    """Tests for ROT13."""

    def test_known_value(self):
        assert rot13("Hello, World!") == "Uryyb, Jbeyq!"

    def test_matches_caesar_13(self):
        text = "Why did the chicken cross the road?"
        assert rot13(text) == caesar(text, 13, "encode", True)

    def test_self_inverse(self):
        assert rot13(rot13(MIXED_TEXT)) == MIXED_TEXT


# ============================================================================
# Reverse / Replace / Case
# ============================================================================


class TestReverse:
    """Tests for reverse_text."""

    def test_reverse(self):
        assert reverse_text("abc") == "cba"

    def test_reverse_code_points(self):
        """Characters outside the BMP stay intact."""
        assert reverse_text("a😀b") == "b😀a"

    def test_double_reverse_is_identity(self):
        assert reverse_text(reverse_text(MIXED_TEXT)) == MIXED_TEXT

    def test_empty_text(self):
        assert reverse_text("") == ""


class TestReplace:
    """Tests for literal replace."""

    def test_replace_all_occurrences(self):
        assert replace_text("one two one", "one", "1") == "1 two 1"

    def test_special_characters_are_literal(self):
        assert replace_text("a.b.c", ".", "-") == "a-b-c"
        assert replace_text("f(x) = (x)", "(x)", "y") == "fy = y"
        assert replace_text("a+b*c", "+b*", "?") == "a?c"
        assert replace_text("cost $5", "$", "€") == "cost €5"

    def test_match_case(self):
        assert replace_text("Hello hello HELLO", "hello", "bye", True) == "Hello bye HELLO"

    def test_ignore_case(self):
        assert replace_text("Hello hello HELLO", "hello", "bye", False) == "bye bye bye"

    def test_ignore_case_non_ascii(self):
        assert replace_text("ÉCOLE école", "école", "school", False) == "school school"

    def test_non_overlapping_left_to_right(self):
        assert replace_text("aaaa", "aa", "b") == "bb"
        assert replace_text("aaa", "aa", "b", False) == "ba"

    def test_empty_from_text_is_identity(self):
        assert replace_text("unchanged", "", "x") == "unchanged"

    def test_missing_to_text_deletes(self):
        assert replace_text("banana", "an", None) == "ba"

    def test_replace_with_itself_is_identity(self):
        assert replace_text(MIXED_TEXT, "l", "l") == MIXED_TEXT
        assert replace_text("Hello", "l", "l", False) == "Hello"

    def test_empty_text(self):
        assert replace_text("", "a", "b") == ""


class TestCaseTransform:
    """Tests for case transforms."""

    def test_upper(self):
        assert transform_case("Hello wörld", "upper") == "HELLO WÖRLD"

    def test_upper_full_case_mapping(self):
        assert transform_case("straße", "upper") == "STRASSE"

    def test_lower(self):
        assert transform_case("HeLLo WÖRLD", "lower") == "hello wörld"

    def test_title(self):
        assert transform_case("hello wORLD", "title") == "Hello World"

    def test_title_apostrophes_and_unicode(self):
        assert title_case("o'neil") == "O'Neil"
        assert title_case("élan vital") == "Élan Vital"

    def test_title_word_boundaries(self):
        """Letters joined to a digit or underscore do not start a word."""
        assert title_case("3rd place") == "3rd Place"
        assert title_case("snake_case words") == "Snake_case Words"

    def test_toggle(self):
        assert toggle_case("Hello World 123") == "hELLO wORLD 123"

    def test_toggle_leaves_uncased_characters(self):
        assert toggle_case("123 !? 中文") == "123 !? 中文"

    def test_unknown_mode_is_identity(self):
        assert transform_case("Hello", "sideways") == "Hello"

    @pytest.mark.parametrize("case_mode", ["upper", "lower", "title", "toggle"])
    def test_empty_text(self, case_mode):
        assert transform_case("", case_mode) == ""


# ============================================================================
# A1Z26
# ============================================================================


class TestA1Z26:
    """Tests for A1Z26 encode and decode."""

    def test_encode(self):
        assert a1z26_encode("abc xyz") == "1 2 3 24 25 26"

    def test_encode_is_case_insensitive(self):
        assert a1z26_encode("ABC") == a1z26_encode("abc") == "1 2 3"

    def test_encode_keeps_non_letters_as_tokens(self):
        assert a1z26_encode("Hi!") == "8 9 !"
        assert a1z26_encode("a,b") == "1 , 2"

    def test_encode_collapses_and_trims_whitespace(self):
        assert a1z26_encode("  a  ") == "1"
        assert a1z26_encode("a\n\nb") == "1 2"

    def test_encode_letters_by_lowercase_form(self):
        assert a1z26_encode("\u212a") == "11"
        assert a1z26_encode("\u212aey") == "11 5 25"

    def test_encode_empty(self):
        assert a1z26_encode("") == ""

    def test_decode(self):
        assert a1z26_decode("1 2 3 24 25 26") == "a b c x y z"

    def test_decode_only_standalone_tokens_in_range(self):
        assert a1z26_decode("27 0 01 a1 1_ 10") == "27 0 01 a1 1_ j"

    def test_decode_punctuation_delimits_tokens(self):
        assert a1z26_decode("1,2-3") == "a,b-c"

    def test_decode_non_ascii_letters_delimit_tokens(self):
        assert a1z26_decode("é5") == "ée"

    def test_decode_leaves_long_numbers(self):
        assert a1z26_decode("123 2026") == "123 2026"

    def test_round_trip_keeps_letters_only(self):
        """Decoding an encoding reproduces the lowercase letters of the input."""
        decoded = a1z26_decode(a1z26_encode("Hello, World"))
        letters = [char for char in decoded if char.isalpha()]
        assert "".join(letters) == "helloworld"


# ============================================================================
# Vigenère
# ============================================================================


class TestVigenere:
    """Tests for the Vigenère cipher."""

    def test_key_offsets(self):
        assert key_offsets("KEY") == [10, 4, 24]
        assert key_offsets("a-b c1") == [0, 1, 2]
        assert key_offsets("") == []
        assert key_offsets(None) == []

    def test_encode_lemon(self):
        assert vigenere("attack at dawn", "LEMON") == "lxfopv ef rnhr"

    def test_encode_default_key(self):
        assert vigenere("attack at dawn", "KEY") == "kxrkgi kx bkal"

    def test_decode_default_key(self):
        assert vigenere("kxrkgi kx bkal", "KEY", "decode") == "attack at dawn"

    def test_non_letters_do_not_consume_key(self):
        assert vigenere("a a", "ab") == "a b"
        assert vigenere("a1a", "ab") == "a1b"

    def test_kelvin_sign_consumes_key_in_text_and_key(self):
        """A character counted as a key letter is also shifted as a text letter."""
        assert key_offsets("\u212a") == [10]
        assert vigenere("\u212aa", "ab") == "kb"

    def test_preserve_case(self):
        assert vigenere("Attack", "KEY", "encode", True) == "Kxrkgi"
        assert vigenere("Attack", "KEY", "encode", False) == "kxrkgi"

    @pytest.mark.parametrize("key", ["", "123", "!!!", None])
    def test_key_without_letters_is_identity(self, key):
        assert vigenere("attack", key) == "attack"

    @pytest.mark.parametrize("key", ["A", "KEY", "lemon", "Zebra"])
    def test_round_trip(self, key):
        text = "Meet me at the Old Mill, 10pm!"
        assert vigenere(vigenere(text, key), key, "decode") == text


# ============================================================================
# Rail fence
# ============================================================================


class TestRailFence:
    """Tests for rail-fence transposition."""

    def test_zigzag_pattern(self):
        assert zigzag_pattern(7, 3) == [0, 1, 2, 1, 0, 1, 2]
        assert zigzag_pattern(5, 2) == [0, 1, 0, 1, 0]

    def test_encode_classic_example(self):
        assert (
            rail_fence_encode("WEAREDISCOVEREDFLEEATONCE", 3)
            == "WECRLTEERDSOEEFEAOCAIVDEN"
        )

    def test_decode_classic_example(self):
        assert (
            rail_fence_decode("WECRLTEERDSOEEFEAOCAIVDEN", 3)
            == "WEAREDISCOVEREDFLEEATONCE"
        )

    def test_encode_two_rails(self):
        assert rail_fence_encode("HELLO", 2) == "HLOEL"

    @pytest.mark.parametrize("rails", range(2, 11))
    def test_round_trip(self, rails):
        text = "Rail fences, zig-zags & Ünïcödé!"
        assert rail_fence_decode(rail_fence_encode(text, rails), rails) == text

    def test_more_rails_than_characters(self):
        assert rail_fence_encode("abc", 10) == "abc"
        assert rail_fence_decode("abc", 10) == "abc"

    @pytest.mark.parametrize("rails", [0, 1])
    def test_single_rail_is_identity(self, rails):
        assert rail_fence_encode("HELLO", rails) == "HELLO"
        assert rail_fence_decode("HELLO", rails) == "HELLO"

    @pytest.mark.parametrize("text", ["", "x"])
    def test_short_text_is_identity(self, text):
        assert rail_fence_encode(text, 3) == text
        assert rail_fence_decode(text, 3) == text
