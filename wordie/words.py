import random

from .pallet import InvalidWord

import logging
logger = logging.getLogger()


def read_dict(dictpath):
    """
    read a word per line, skipping anything that isn't a plain word
    """
    dictionary = dictpath.open(encoding='utf-8').read().splitlines()
    logger.debug(f"starting dictionary contains {len(dictionary)} lines")

    words = set()

    for word in dictionary:
        word = word.strip().lower()

        if all([
            word,                   # skip blank lines, eg. the trailing one
            word.isalpha(),         # no apostrophes or hyphens
        ]):
            words.add(word)

    logger.debug(f"our word list contains {len(words)} words")
    return words


class WordSource:
    """
    the static word list, picks the secret and validates guesses
    """

    def __init__(self, words):
        self._words = frozenset(word.strip().lower() for word in words if word.strip())

        if not self._words:
            raise InvalidWord("word list is empty")

    @classmethod
    def from_path(cls, dictpath):
        return cls(read_dict(dictpath))

    @property
    def words(self):
        return self._words

    def __len__(self):
        return len(self._words)

    def __contains__(self, word):
        return self.contains(word)

    def contains(self, word):
        return word in self._words

    def candidates(self, wordlen):
        return sorted(word for word in self._words if len(word) == wordlen)

    def pick_secret(self, wordlen=5):
        candidates = self.candidates(wordlen)

        if not candidates:
            raise ValueError(f"no {wordlen} letter words in word list")

        # sorted first so a seeded random gives the same word every run
        return random.choice(candidates)
