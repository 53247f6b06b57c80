import logging
logger = logging.getLogger()


class InvalidWord(ValueError):
    """
    the secret word (or word list) can't be used to play a game
    """


class Letter:
    """
    one letter of the secret word and whether the player has found
    it in its exact spot yet
    """

    __slots__ = ('_value', '_position', '_revealed')

    def __init__(self, value, position):
        self._value    = value
        self._position = position
        self._revealed = False

    @property
    def value(self):
        return self._value

    @property
    def position(self):
        return self._position

    @property
    def revealed(self):
        return self._revealed

    def reveal(self):
        # once found a letter stays found
        self._revealed = True

    def __eq__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented

        return (self.value, self.position, self.revealed) == \
               (other.value, other.position, other.revealed)

    def __repr__(self):
        return f"Letter({self.value!r}, {self.position}, revealed={self.revealed})"


class Pallet:
    """
    the secret word split into positioned letters

    Pallet only holds state, Session decides when a letter gets revealed.
    """

    def __init__(self, word=None):
        self._letters = None

        if word is not None:
            self.initialize(word)

    def initialize(self, word):
        if self._letters is not None:
            raise RuntimeError("pallet is already initialized")

        if not isinstance(word, str) or not word:
            raise InvalidWord("empty word for pallet init")

        self._letters = [Letter(value, i) for i, value in enumerate(word)]
        logger.debug(f"pallet initialized with {len(self._letters)} letters")

    @property
    def letters(self):
        if self._letters is None:
            raise RuntimeError("pallet is not initialized")

        return self._letters

    @property
    def word(self):
        return ''.join(letter.value for letter in self.letters)

    def __len__(self):
        return len(self.letters)

    def __iter__(self):
        return iter(self.letters)

    def __getitem__(self, position):
        return self.letters[position]

    def search(self, value):
        """
        return whether value is in the word at all and every position
        holding it, in ascending order
        """
        positions = tuple(
            letter.position for letter in self.letters if letter.value == value
        )
        return bool(positions), positions

    def count(self, value):
        _found, positions = self.search(value)
        return len(positions)

    def reveal(self, position):
        self.letters[position].reveal()

    def is_solved(self):
        return all(letter.revealed for letter in self.letters)

    def render(self, placeholder='_'):
        return [
            letter.value if letter.revealed else placeholder
            for letter in self.letters
        ]

    def __repr__(self):
        if self._letters is None:
            return "Pallet(<uninitialized>)"

        return f"Pallet({''.join(self.render())!r})"
