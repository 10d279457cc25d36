"""Parcel calculator version, stamped on every priced row."""

VERSION = "1.0.0"
