import pytest

from pushswap.parsing import (
    InputError,
    arguments_to_tokens,
    assign_indices,
    is_valid_number,
    parse_numbers,
    split_words,
)


def test_split_words_skips_repeated_separators():
    assert split_words("  1 22   -3 ", " ") == ["1", "22", "-3"]


def test_split_words_empty_and_blank():
    assert split_words("", " ") == []
    assert split_words("    ", " ") == []


def test_split_words_only_on_given_separator():
    assert split_words("1\t2 3", " ") == ["1\t2", "3"]


@pytest.mark.parametrize("token", ["0", "42", "-7", "+5", "007", "-2147483648"])
def test_valid_numbers(token):
    assert is_valid_number(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "1a", "5+", "--1", " 1", "1 ", "1.0", "1\n"])
def test_invalid_numbers(token):
    assert is_valid_number(token) is False


def test_parse_numbers_converts_tokens():
    assert parse_numbers(["3", "-1", "+5", "0"]) == [3, -1, 5, 0]


def test_parse_numbers_accepts_int_limits():
    assert parse_numbers(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize("tokens", [["2147483648"], ["-2147483649"], ["99999999999"]])
def test_parse_numbers_rejects_overflow(tokens):
    with pytest.raises(InputError):
        parse_numbers(tokens)


def test_parse_numbers_rejects_duplicates():
    with pytest.raises(InputError):
        parse_numbers(["1", "2", "+1"])


def test_parse_numbers_rejects_syntax():
    with pytest.raises(InputError):
        parse_numbers(["1", "two"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_numbers([""])


def test_assign_indices_is_rank():
    values = [42, -3, 17, 0, 8]
    indices = assign_indices(values)
    assert sorted(indices) == list(range(len(values)))
    ordered = sorted(values)
    assert [ordered[i] for i in indices] == values


def test_assign_indices_empty():
    assert assign_indices([]) == []


def test_assign_indices_with_int_min():
    values = [5, -2147483648, 3, 9]
    indices = assign_indices(values)
    assert indices[1] == 1
    others = [index for value, index in zip(values, indices) if value != -2147483648]
    assert sorted(others) == list(range(1, len(values)))
    assert indices[values.index(9)] == len(values) - 1


def test_arguments_to_tokens_no_input():
    assert arguments_to_tokens([]) == []
    assert arguments_to_tokens([""]) == []
    assert arguments_to_tokens(["   "]) == []


def test_arguments_to_tokens_single_argument_is_split():
    assert arguments_to_tokens(["3 2 1"]) == ["3", "2", "1"]


def test_arguments_to_tokens_many_arguments_kept():
    args = ["3", "2 1", ""]
    tokens = arguments_to_tokens(args)
    assert tokens == args
    with pytest.raises(InputError):
        parse_numbers(tokens)


def test_round_trip_through_parsing():
    numbers = parse_numbers(arguments_to_tokens(["10 -4 7"]))
    assert [str(n) for n in numbers] == ["10", "-4", "7"]