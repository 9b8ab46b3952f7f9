"""fspec command line interface."""
