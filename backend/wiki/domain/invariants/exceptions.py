from wiki.exceptions import WikiError


class InvariantViolation(WikiError):
    """A page breaks a domain rule and must not be written."""
