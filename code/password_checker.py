import re

MIN_PASSWORD_LENGTH = 8
DICTIONARY = ("a", "aaron", "abandoned", "account", "accountability")

# Only a single trailing digit counts: "abandoned1" is weak, "abandoned12" is not.
DIGIT_SUFFIX = re.compile(r"[0-9]")


def is_strong_password(password, dictionary=DICTIONARY):
    if len(password) < MIN_PASSWORD_LENGTH:
        return False

    # Check against dictionary
    for word in dictionary:
        if password == word:
            return False
        if password.startswith(word) and DIGIT_SUFFIX.fullmatch(password[len(word):]):
            return False

    return True
