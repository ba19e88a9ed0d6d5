"""Provider Gateway Layer.

Provides async infrastructure for sending one prompt to several LLM
vendors side-by-side:
  - Error Classifier (uniform failure categories across vendors)
  - Vendor-Specific Adapters (OpenAI, Anthropic, Google)
  - Provider Registry (provider id -> adapter)
  - Comparison Orchestrator (concurrent fan-out with failure isolation)
  - Token Validation State Machine (debounced, cancellable credential checks)
"""
