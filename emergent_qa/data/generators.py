"""Random inputs for scenarios that need unique data on every run.

Values come from a module-level ``Faker`` instance that is never seeded
here, so two calls are independent.
"""

from faker import Faker

_faker = Faker()


def random_email() -> str:
    return _faker.email()


def random_password(min_length: int = 8, max_length: int = 12) -> str:
    """Password of ``min_length`` to ``max_length`` characters holding at
    least one upper-case letter, lower-case letter, digit and special
    character."""
    if min_length < 4 or max_length < min_length:
        raise ValueError(f"Invalid password length range: {min_length}-{max_length}")
    return _faker.password(
        length=_faker.random_int(min_length, max_length),
        special_chars=True,
        digits=True,
        upper_case=True,
        lower_case=True,
    )


def random_name() -> str:
    return _faker.name()


def random_project_name() -> str:
    """``Project <Word> <4 digits>``"""
    return f"Project {_faker.word().capitalize()} {_faker.random_int(0, 9999):04d}"


def random_project_description() -> str:
    """A paragraph of three to six sentences."""
    return _faker.paragraph(nb_sentences=_faker.random_int(3, 6), variable_nb_sentences=False)
