"""SmartCalc package: tokenizer, converter, evaluator, variable store and CLI."""

__all__ = [
    "config",
    "parser",
    "evaluator",
    "assignment",
    "store",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "process_input",
    "evaluate",
    "validate_expression",
]
