"""AuthGate: user registration, login and token identity lookup over HTTP."""

__version__ = "0.1.0"
