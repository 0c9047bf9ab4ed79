"""Adapters – OpenTelemetry tracing, HashiCorp Vault and Kubernetes providers."""
