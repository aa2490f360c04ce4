"""Graph nodes of the SeggWat workflow node."""
