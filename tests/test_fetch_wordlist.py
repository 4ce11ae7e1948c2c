from script.fetch_wordlist import extract_words


def test_extract_words_from_plain_text():
    text = "crane\nRAISE\n toolong\ncrane\nst4re\n"
    assert extract_words(text, "text/plain") == ["crane", "raise"]

def test_extract_words_from_html():
    html = "<html><body><p>Crane RAISE</p><ul><li>toolong</li><li>crane</li><li>slate</li></ul></body></html>"
    assert extract_words(html, "text/html; charset=utf-8") == ["crane", "raise", "slate"]

def test_extract_words_other_length():
    assert extract_words("letter crane planet", N=6) == ["letter", "planet"]
