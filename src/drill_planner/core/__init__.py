"""Planning core: drill catalog, time breakdown parsing, tailoring, composition."""
