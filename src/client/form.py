from dataclasses import dataclass

from .models import SignupRequest


@dataclass
class SignupForm:
    """Mutable form state: the two input fields and the loading flag.

    While ``loading`` is true the submit trigger should be disabled.
    """

    name: str = ""
    email: str = ""
    loading: bool = False

    def to_request(self) -> SignupRequest:
        return SignupRequest(name=self.name.strip(), email=self.email.strip())

    def clear(self) -> None:
        self.name = ""
        self.email = ""
