from atelier.digit_sum import main, token_value, total

EXAMPLE = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]


def test_worked_example():
    assert total(EXAMPLE) == 142


def test_single_digit_is_used_twice():
    assert token_value("x4y") == token_value("44")


def test_letters_do_not_matter():
    assert token_value("12") == token_value("a1bc2d")


def test_no_digits_counts_as_minus_eleven():
    assert token_value("abc") == -11


def test_total_is_sum_of_tokens():
    assert total(EXAMPLE) == sum(token_value(t) for t in EXAMPLE)
    assert total([]) == 0


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"Totalul este: {total(EXAMPLE)}\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err == "Fisierul nu a fost gasit."