from .registration import SlackRegistrationMixin

__all__ = [
    "SlackRegistrationMixin",
]
