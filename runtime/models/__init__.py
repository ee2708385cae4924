"""
Pydantic / datamodels used by the Desk Toolkit runtime.

- outcome_models: OutcomeRecord + OutcomeResult + TaskStatus
"""
