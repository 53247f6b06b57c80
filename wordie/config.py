import os
import collections


class GameConfig(collections.namedtuple('GameConfig', ['vocabulary_check', 'reveal_secret'])):
    """
    vocabulary_check: reject guesses that aren't in the word list
    reveal_secret: show the secret word when the game starts
    """

    __slots__ = ()

    def __new__(cls, vocabulary_check=True, reveal_secret=False):
        return super().__new__(cls, vocabulary_check, reveal_secret)

    @classmethod
    def from_env(cls, environ=None):
        """
        DEBUG=<anything> turns on cheat mode, any guess is allowed and
        the secret word is printed at start
        """
        if environ is None:
            environ = os.environ

        debug = bool(environ.get('DEBUG'))
        return cls(vocabulary_check=not debug, reveal_secret=debug)

    @property
    def debug(self):
        return self.reveal_secret or not self.vocabulary_check
