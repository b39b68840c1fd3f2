"""Runnable demonstrations built on aad_descent."""
