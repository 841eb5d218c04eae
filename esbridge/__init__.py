"""Editor-side tooling for the ECMAScript scripting bridge."""

__version__ = "0.1.0"
