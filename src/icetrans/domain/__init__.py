"""Domain layer: catalog model, merge engine and ports."""
