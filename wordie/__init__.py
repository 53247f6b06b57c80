import pathlib

dictfile = pathlib.Path(__file__).parent / 'dictionary.txt'
wordlen  = 5
attempts = 5
