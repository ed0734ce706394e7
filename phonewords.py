from general import *
import digitparser
import parsy

import argparse
import itertools
import sys

from frozendict import frozendict

# letters printed on each key; 0 and 1 have none
keypad = frozendict({2 : "ABC",
                     3 : "DEF",
                     4 : "GHI",
                     5 : "JKL",
                     6 : "MNO",
                     7 : "PQRS",
                     8 : "TUV",
                     9 : "WXYZ"})

class InvalidDigit(Exception):
    "A digit with no letters on its key."

    def __init__(self, digit, position):
        super().__init__("digit {} at position {} has no letters".format(digit, position))
        self.digit = digit
        self.position = position

def letter_sets(digits):
    """Look up the letters of each digit, parsing first if digits is a string.
       Raise a ParseError or InvalidDigit before anything is enumerated."""
    if isinstance(digits, str):
        digits = digitparser.parse_digits(digits)
    sets = []
    for (i, d) in enumerate(digits):
        if d not in keypad:
            raise InvalidDigit(d, i)
        sets.append(keypad[d])
    return sets

def digits_to_words(digits):
    "Lazily generate the words spelled by a digit list or digit string."
    sets = letter_sets(digits)
    return ("".join(chars) for chars in cross_product(sets))

def letter_bounds(sets):
    "Largest letter index of each key."
    return [len(letters)-1 for letters in sets]

def count_words(digits):
    return cross_product_size(letter_bounds(letter_sets(digits)))


class PhoneWords:
    def __init__(self, verbose=False):
        self.verbose = verbose

    def report_error(self, e, mode):
        if isinstance(e, parsy.ParseError):
            print("Parse error: {}".format(e))
            linenum, lineindex = parsy.line_info_at(e.stream, e.index)
            lines = e.stream.splitlines()
            the_line = lines[linenum] if linenum < len(lines) else ""
            print(the_line)
            print(" "*lineindex + "^")
        else:
            print("Invalid digit: {}".format(e))
        if mode == "assert":
            raise e

    def run(self, digits, mode="report", limit=None):
        "Print the words of digits, at most limit of them. Return them as a list, or None on bad input."
        if limit is not None and limit < 0:
            raise ValueError("Negative word limit {}".format(limit))
        try:
            if isinstance(digits, str):
                digits = digitparser.parse_digits(digits)
            sets = letter_sets(digits)
        except (parsy.ParseError, InvalidDigit) as e:
            self.report_error(e, mode)
            return None
        if self.verbose:
            print("digits", list(digits), "words", cross_product_size(letter_bounds(sets)))
        words = []
        for chars in itertools.islice(cross_product(sets), limit):
            word = "".join(chars)
            print(word)
            words.append(word)
        return words

    def count(self, digits, mode="report"):
        "Print and return the number of words of digits, or None on bad input."
        try:
            num = count_words(digits)
        except (parsy.ParseError, InvalidDigit) as e:
            self.report_error(e, mode)
            return None
        print(num)
        return num


def natural(arg):
    n = int(arg)
    if n < 0:
        raise argparse.ArgumentTypeError("{} is negative".format(arg))
    return n

def main(argv=None):
    arg_parser = argparse.ArgumentParser(description="Print the letter combinations of a phone number.")
    arg_parser.add_argument("digits", metavar='d', type=str, nargs='?', default="3868")
    arg_parser.add_argument("--limit", type=natural, default=None,
                            help="print at most this many words")
    arg_parser.add_argument("--count", action="store_true",
                            help="only print the number of words")
    arg_parser.add_argument("--verbose", action="store_true")
    args = arg_parser.parse_args(argv)

    runner = PhoneWords(verbose=args.verbose)
    if args.count:
        result = runner.count(args.digits)
    else:
        result = runner.run(args.digits, limit=args.limit)
    return 1 if result is None else 0


if __name__ == "__main__":
    sys.exit(main())
