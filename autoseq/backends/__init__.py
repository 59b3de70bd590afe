"""Optional dataframe backends for autoseq."""
