"""Constants shared across the SimGlass sub-packages."""
