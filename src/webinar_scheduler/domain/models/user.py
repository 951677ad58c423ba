"""User identity as resolved by the authentication layer upstream."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    Acting user.

    Only id is read by the webinar use cases; the credential is carried
    along untouched.
    """

    id: str
    email: str
    password: str = field(default="", repr=False)
