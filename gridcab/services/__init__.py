"""Services for the GridCab application."""
