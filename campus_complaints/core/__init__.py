"""Core building blocks shared by repositories and services."""
