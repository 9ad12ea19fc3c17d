"""Offline anti-forgery and CAPTCHA verifiers for local runs."""


class AllowAllNonceVerifier:
    """Accepts any non-empty token."""

    def verify(self, token: str, action: str) -> bool:
        return bool(token)


class StaticCaptchaVerifier:
    """Accepts a fixed set of response tokens, or any non-empty token."""

    def __init__(self, accepted: set[str] | None = None) -> None:
        self.accepted = accepted

    def verify(self, token: str, secret: str) -> bool:
        if not token:
            return False
        if self.accepted is None:
            return True
        return token in self.accepted
