"""Port interfaces for vcstamp's external collaborators."""
