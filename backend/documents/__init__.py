"""Field extraction and Word rendering for the model tenancy agreement."""
