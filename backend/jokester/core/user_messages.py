"""User Messages — centralized end-user text for error boundaries and form errors.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Each terminal error maps to exactly one message per operation

Design Decisions:
    - Messages live next to the domain, not in routes: the service attaches them
      to ErrorContext.user_message so any presentation layer can show them as-is
"""

NAME_TOO_SHORT = "Title is too short"
NAME_TOO_LONG = "Title is too long"
CONTENT_TOO_SHORT = "Content is too short"
FORM_BAD_REQUEST = "Bad request"

NO_JOKES_TO_DISPLAY = "There are no jokes to display."
LOGIN_REQUIRED_TO_CREATE = "You must be logged in to create a joke."
NOT_YOUR_JOKE = "It's not your joke"
CANNOT_DELETE_OTHERS = "Nice try! You can't delete other users' jokes"
JOKE_NOT_FOUND = "Joke not found"


def unknown_joke(joke_id: str) -> str:
    """Message shown when a joke id does not resolve."""
    return f'Huh? What the heck is "{joke_id}"?'
