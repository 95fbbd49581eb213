"""Membership / orders quote frontends backed by the interest service."""
