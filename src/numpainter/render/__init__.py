"""Paint values, surface helpers and the Canvas protocol."""
