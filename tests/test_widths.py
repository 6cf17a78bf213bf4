from consoleview.widths import Width


def test_initial_width():
    assert Width(5).chars() == 5


def test_grows_but_never_shrinks():
    width = Width(5)
    width.update_len(3)
    assert width.chars() == 5
    width.update_len(40)
    assert width.chars() == 40
    width.update_len(10)
    assert width.chars() == 40


def test_capped_at_one_hundred():
    width = Width(5)
    width.update_len(1000)
    assert width.chars() == 100


def test_update_str_returns_its_argument():
    width = Width(2)
    text = "tokio::task"
    assert width.update_str(text) is text
    assert width.chars() == len(text)


def test_update_str_counts_utf8_bytes():
    width = Width(0)
    width.update_str("µµ")
    assert width.chars() == 4


def test_long_string_capped():
    width = Width(0)
    width.update_str("x" * 500)
    assert width.chars() == 100