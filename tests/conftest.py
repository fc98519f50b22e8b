"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when the container first needs them
os.environ["ENVIRONMENT"] = "test"
os.environ["IDENT__SERVER_NAME"] = "test"
os.environ["IDENT__BASE_URL"] = "http://127.0.0.1:9999"
os.environ["IDENT__SIGNING_KEY__ALGO"] = "ed25519"
os.environ["IDENT__SIGNING_KEY__ID"] = "0"
os.environ["IDENT__SIGNING_KEY__SEED"] = "ahphigh9jahchiequiechee4pha1Atuv"
os.environ["DATABASE__URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE__AUTO_CREATE_SCHEMA"] = "true"
os.environ["OBSERVABILITY__SEND_TO_LOGFIRE"] = "false"

logfire.configure(send_to_logfire=False, console=False)
