# This file marks the services package for API business logic.
# Services are constructed in `dependencies.py` and injected into routers.
