"""Pure commission domain logic."""
