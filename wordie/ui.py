import logging

import click

from . import dictfile, wordlen, attempts
from .config import GameConfig
from .session import Session, Score, GuessError, signals
from .words import WordSource

from rich.console import Console
from rich.markup import escape
print = Console(color_system='truecolor', highlight=False).print

logger = logging.getLogger()


class Renderer:
    """
    turn scored letters into rich markup, no printing happens here
    """

    EMOJI_IN     = '🟨'
    EMOJI_OUT    = '⬜'
    EMOJI_EXACT  = '🟩'

    SOLVE_QUIPS = {
        3: "GET OUTTA HERE FOURS!",
        4: "STUPID FOURS!",
    }

    @classmethod
    def colorize(cls, code, text):
        """
        colorize text using rich color tags
        code: a Score.X classification
        text: the text to wrap with color tags
        """
        if code == Score.PRESENT:
            color = 'bold dark_goldenrod'
        elif code == Score.ABSENT:
            color = 'grey'
        elif code == Score.EXACT:
            color = 'green'
        else:
            raise RuntimeError(f"unknown code: {code}")

        return f"[{color}]{text}[/{color}]"

    @classmethod
    def board(cls, letters):
        """
        letters: Pallet.render(), unrevealed letters are already '_'
        """
        return ' '.join(escape(letter) for letter in letters)

    @classmethod
    def scored(cls, letters):
        return ''.join([
            cls.colorize(letter.score, f" {escape(letter.value)} ")
            for letter in letters
        ])

    @classmethod
    def emoji(cls, response):
        emoji = {
            Score.PRESENT: cls.EMOJI_IN,
            Score.ABSENT:  cls.EMOJI_OUT,
            Score.EXACT:   cls.EMOJI_EXACT,
        }
        return ''.join(emoji[c] for c in response)

    @classmethod
    def solved(cls, count):
        lines = [f"[bold green]SOLVED![/bold green] in {count} {'guess' if count == 1 else 'guesses'}"]

        if quip := cls.SOLVE_QUIPS.get(count):
            lines.append(f"[bold]{quip}[/bold]")

        return '\n'.join(lines)

    @classmethod
    def exhausted(cls, word):
        return f"[bold yellow]GAME OVER. The wordie was: [blue]{word}[/blue][/bold yellow]"

    @classmethod
    def error(cls, err):
        return f"[red]error:[/red] {err}"


class GameUI:

    def __init__(self, session, config=None):
        self.session = session
        self.config  = config if config is not None else session.config
        self.rounds  = [] # [guess, response]

        signals.guess_scored.connect(self.cb_guess_scored, sender=session)
        signals.guess_rejected.connect(self.cb_guess_rejected, sender=session)
        signals.game_over.connect(self.cb_game_over, sender=session)

    def cb_guess_scored(self, sender, result):
        self.rounds.append([result.guess, result.response])
        print(Renderer.scored(result.letters))

    def cb_guess_rejected(self, sender, error):
        print(Renderer.error(error))

    def cb_game_over(self, sender, result):
        if sender.is_solved:
            print(Renderer.solved(result.attempts_used))
        else:
            print(Renderer.exhausted(sender.word))

        self.show_summary()

    def show_summary(self):
        print()
        for _guess, resp in self.rounds:
            print(Renderer.emoji(resp))

    def get_guess(self):
        try:
            return input()
        except EOFError:
            logger.debug("input closed, treating as an empty guess")
            return None

    def play(self):
        print("Wordie...")

        if self.config.reveal_secret:
            print(f"DEBUG enabled, solution is: {self.session.word}")

        print(Renderer.board(self.session.pallet.render()))

        while not self.session.is_over:
            raw = self.get_guess()

            try:
                self.session.submit(raw)
            except GuessError:
                # mulligan! already reported through guess_rejected
                if raw is None:
                    # nothing more to read
                    return
                continue


@click.command()
@click.pass_context
def cli(ctx, *args, **kw):
    """
    play a game of wordie

    a random word is picked from the bundled word list, you have 5 guesses
    to find it. Set DEBUG=1 to see the word and allow any guess.
    """

    config = GameConfig.from_env()
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if config.debug else logging.WARNING)

    try:
        words = WordSource.from_path(dictfile)
        session = Session(words.pick_secret(wordlen), attempts, config=config, vocabulary=words)
    except ValueError as e: # InvalidWord included
        raise click.ClickException(str(e))

    try:
        ui = GameUI(session, config)
        ui.play()
    except KeyboardInterrupt:
        pass
