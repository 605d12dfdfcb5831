# CodeOwner: @python_owner

"""Module docstring."""


def greet(name):
    # Another comment
    return f"Hello, {name}!"
