# Admin registrations live in the interfaces layer; Django autodiscovers them here.
from .interfaces import admin  # noqa: F401
