from input_validator.pipeline.orchestrator import collect_errors, validate_inputs

__all__ = ["collect_errors", "validate_inputs"]
