"""Static website + API infrastructure with validated inputs and derived outputs."""
