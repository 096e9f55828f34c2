from repaddu.analysis_tokens import estimate_tokens


def test_empty_content_is_zero():
    assert estimate_tokens("") == 0
    assert estimate_tokens(b"") == 0


def test_short_content_is_at_least_one():
    assert estimate_tokens("a") >= 1
    assert estimate_tokens("abcd") == 1


def test_rounds_up_past_boundary():
    assert estimate_tokens("abcde") == 2


def test_str_and_bytes_agree():
    text = "int main() { return 0; }\n"
    assert estimate_tokens(text) == estimate_tokens(text.encode("utf-8"))


def test_counts_encoded_bytes():
    assert estimate_tokens("\u00e9\u00e9") == estimate_tokens("abcd")


def test_monotonic_in_length():
    previous = 0
    for length in range(0, 50):
        current = estimate_tokens("x" * length)
        assert current >= previous
        previous = current


def test_doubling_content_never_more_than_doubles_estimate_plus_one():
    text = "some repeated content " * 7
    single = estimate_tokens(text)
    double = estimate_tokens(text * 2)
    assert single <= double <= 2 * single