"""HTTP interface for the ALX Showcase classifier."""
