from corbusier.cli import main


def test_main_prints_greeting(capsys):
    status = main([])
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == "Hello from Corbusier!\n"
    assert captured.err == ""


def test_main_without_arguments(capsys):
    assert main() == 0
    assert capsys.readouterr().out.strip() == "Hello from Corbusier!"