import collections

from blinker import signal

from .pallet import Pallet
from .config import GameConfig
from . import attempts as default_attempts

import logging
logger = logging.getLogger()


class Score:

    PRESENT = 'i' # in, in word but wrong spot
    ABSENT  = 'o' # out, not in word
    EXACT   = 'e' # exact spot

    @classmethod
    def response_set(cls):
        return set([
            cls.PRESENT,
            cls.ABSENT,
            cls.EXACT,
        ])


ScoredLetter = collections.namedtuple('ScoredLetter', ['value', 'position', 'score'])


class GuessResult(collections.namedtuple('GuessResult', ['guess', 'letters', 'state', 'attempts_used'])):
    __slots__ = ()

    @property
    def response(self):
        """
        letter scores as a string, eg. 'ieooe'
        """
        return ''.join(letter.score for letter in self.letters)


class GuessError(Exception):
    """
    a guess that was rejected without using up an attempt
    """


class LengthMismatch(GuessError):
    def __init__(self, expected, got):
        super().__init__(f"bad length: {got}, use length: {expected}")
        self.expected = expected
        self.got = got


class UnknownWord(GuessError):
    def __init__(self, word):
        super().__init__("guess not found in dictionary")
        self.word = word


class GameOver(GuessError):
    def __init__(self, state):
        super().__init__("game is over")
        self.state = state


class Signals:

    guess_scored   = signal('guess-scored',   doc='sent with result= after every accepted guess')
    guess_rejected = signal('guess-rejected', doc='sent with error= when a guess is a mulligan')
    game_over      = signal('game-over',      doc='sent with result= when the session ends')

signals = Signals()


def normalize(raw):
    if raw is None:
        return ''

    return raw.strip().lower()


def score(pallet, guess):
    """
    score guess against the secret word held in pallet

    Every occurrence of a letter in the secret is worth one credit. Exact
    matches spend their credit first, whatever is left goes to the other
    copies of that letter in the guess, left to right. Copies past the
    credit score ABSENT.
    """

    scores = [None] * len(guess)
    used = collections.defaultdict(int)

    for i, value in enumerate(guess):
        _found, positions = pallet.search(value)
        if i in positions:
            scores[i] = Score.EXACT
            used[value] += 1

    for i, value in enumerate(guess):
        if scores[i] is not None:
            continue

        if used[value] < pallet.count(value):
            scores[i] = Score.PRESENT
        else:
            scores[i] = Score.ABSENT

        used[value] += 1

    return [
        ScoredLetter(value, i, s)
        for i, (value, s) in enumerate(zip(guess, scores))
    ]


class Session:

    IN_PROGRESS = 'in-progress'
    SOLVED      = 'solved'
    EXHAUSTED   = 'exhausted'

    def __init__(self, word, attempts=default_attempts, config=None, vocabulary=None):
        """
        word: the secret word
        attempts: how many accepted guesses before the game is lost
        config: GameConfig, defaults to checking guesses against vocabulary
        vocabulary: anything supporting `in`, None accepts any word
        """

        if attempts < 1:
            raise ValueError(f"attempts must be positive, not {attempts}")

        self.config     = config if config is not None else GameConfig()
        self.vocabulary = vocabulary
        self.pallet     = Pallet(normalize(word))

        self._attempts_allowed = attempts
        self._attempts_used    = 0
        self._state            = self.IN_PROGRESS

    @property
    def word(self):
        return self.pallet.word

    @property
    def wordlen(self):
        return len(self.pallet)

    @property
    def attempts_allowed(self):
        return self._attempts_allowed

    @property
    def attempts_used(self):
        return self._attempts_used

    @property
    def attempts_left(self):
        return self._attempts_allowed - self._attempts_used

    @property
    def state(self):
        return self._state

    @property
    def is_over(self):
        return self._state != self.IN_PROGRESS

    @property
    def is_solved(self):
        return self._state == self.SOLVED

    def validate(self, guess):
        """
        raise a GuessError if guess (already normalized) can't be scored
        """

        if self.is_over:
            raise GameOver(self._state)

        if len(guess) != self.wordlen:
            raise LengthMismatch(self.wordlen, len(guess))

        if all([
            self.config.vocabulary_check,
            self.vocabulary is not None,
        ]) and guess not in self.vocabulary:
            raise UnknownWord(guess)

    def submit(self, raw):
        guess = normalize(raw)

        try:
            self.validate(guess)
        except GuessError as e:
            logger.debug(f"mulligan for {guess!r}: {e}")
            signals.guess_rejected.send(self, error=e)
            raise

        self._attempts_used += 1

        letters = score(self.pallet, guess)
        for letter in letters:
            if letter.score == Score.EXACT:
                self.pallet.reveal(letter.position)

        if self.pallet.is_solved():
            self._state = self.SOLVED
        elif self._attempts_used >= self._attempts_allowed:
            self._state = self.EXHAUSTED

        result = GuessResult(guess, letters, self._state, self._attempts_used)
        logger.debug(f"guess {self._attempts_used}/{self._attempts_allowed}: {guess} -> {result.response}")

        signals.guess_scored.send(self, result=result)

        if self.is_over:
            logger.debug(f"session {self._state} after {self._attempts_used} guesses")
            signals.game_over.send(self, result=result)

        return result

    def __repr__(self):
        return f"Session({self._state}, {self._attempts_used}/{self._attempts_allowed})"
