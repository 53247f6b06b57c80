import pytest
from click.testing import CliRunner

from wordie.session import Score, ScoredLetter
from wordie.ui import Renderer, cli
from wordie.words import WordSource


@pytest.mark.parametrize("code,expected", [
    (Score.EXACT, "[green]a[/green]"),
    (Score.PRESENT, "[bold dark_goldenrod]a[/bold dark_goldenrod]"),
    (Score.ABSENT, "[grey]a[/grey]"),
])
def test_colorize(code, expected):
    assert Renderer.colorize(code, 'a') == expected


def test_colorize_unknown_code():
    with pytest.raises(RuntimeError):
        Renderer.colorize('x', 'a')


def test_board():
    assert Renderer.board(['_', 'l', '_', '_', 'w']) == "_ l _ _ w"


def test_scored():
    letters = [
        ScoredLetter('o', 0, Score.EXACT),
        ScoredLetter('k', 1, Score.ABSENT),
    ]
    assert Renderer.scored(letters) == "[green] o [/green][grey] k [/grey]"


def test_emoji():
    assert Renderer.emoji('eio') == '🟩🟨⬜'


@pytest.mark.parametrize("count,quip", [
    (1, None),
    (3, "GET OUTTA HERE FOURS!"),
    (4, "STUPID FOURS!"),
    (5, None),
])
def test_solved_quips(count, quip):
    text = Renderer.solved(count)

    assert "SOLVED!" in text
    if quip:
        assert quip in text
    else:
        assert "FOURS" not in text


def test_exhausted():
    assert "The wordie was: [blue]allow[/blue]" in Renderer.exhausted('allow')


@pytest.fixture
def secret(monkeypatch):
    monkeypatch.delenv('DEBUG', raising=False)
    monkeypatch.setattr(WordSource, 'pick_secret', lambda self, wordlen=5: 'allow')
    return 'allow'


def test_cli_solves(secret):
    result = CliRunner().invoke(cli, input="all\nzzzzz\nllama\nallow\n")

    assert result.exit_code == 0, result.output
    assert "Wordie..." in result.output
    assert "_ _ _ _ _" in result.output
    assert "bad length: 3, use length: 5" in result.output
    assert "guess not found in dictionary" in result.output
    assert "SOLVED!" in result.output
    assert "FOURS" not in result.output
    assert "🟨🟩🟨⬜⬜" in result.output
    assert "🟩🟩🟩🟩🟩" in result.output
    assert "solution is" not in result.output


def test_cli_game_over(secret):
    guesses = "crane\n" * 5
    result = CliRunner().invoke(cli, input=guesses)

    assert result.exit_code == 0, result.output
    assert "GAME OVER. The wordie was:" in result.output
    assert "allow" in result.output
    assert result.output.count("⬜⬜🟨⬜⬜") == 5


def test_cli_debug_mode(secret, monkeypatch):
    monkeypatch.setenv('DEBUG', '1')
    result = CliRunner().invoke(cli, input="zzzzz\nallow\n")

    assert result.exit_code == 0, result.output
    assert "DEBUG enabled, solution is: allow" in result.output
    assert "guess not found in dictionary" not in result.output
    assert "⬜⬜⬜⬜⬜" in result.output
    assert "SOLVED!" in result.output


def test_cli_closed_input(secret):
    result = CliRunner().invoke(cli, input="")

    assert result.exit_code == 0, result.output
    assert "bad length: 0, use length: 5" in result.output
    assert "GAME OVER" not in result.output
