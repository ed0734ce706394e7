"""
parse_digits takes a string of decimal digits, like a phone
number typed on a keypad, and turns it into a list of integers

there are no separators: every character must be 0-9
"""

import parsy as p

def parse_digits(code):
    "Parse a digit string. Return a list of integers or raise a ParseError."
    return phone_number.parse(code)

digit = p.regex(r'[0-9]').map(int).desc("digit")

phone_number = digit.many()
