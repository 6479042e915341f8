"""Uniform outcome values for operations that can fail.

Modules:
  vocabulary: registered success tags and error categories
  models: Outcome, Success, Failure and ErrorDetail
  errors: OutcomeError, the raisable form of a failure
  classify: exception → failure mapping and the capture() decorator
  boundary: HTTP status and client-safe bodies for API layers
  temporal: ApplicationError conversion for Temporal activities
  settings: environment-driven configuration
"""
