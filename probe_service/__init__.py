"""Liveness sidecar service exposing health, readiness, info and memory endpoints."""
