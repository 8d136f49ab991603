"""Pure receipt processing: item name normalization, payload conversion, formatting."""
