# This file marks the HTTP API package.
# Routers, services, schemas, and the in-memory store live in the sibling modules.
