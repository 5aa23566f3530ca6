"""CLI command modules. Importing a module registers its commands on the shared app."""
