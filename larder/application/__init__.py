"""Application workflows wiring runtime configuration into the pure receipt layer."""
