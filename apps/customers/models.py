# Models live in the infrastructure layer; Django discovers them here.
from .infrastructure.models import *  # noqa: F401,F403
