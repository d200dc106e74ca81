"""publish-easier: build, stage, and publish a package in one step."""

__version__ = "0.1.0"
