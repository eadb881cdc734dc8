"""Engine — collaborator records and capability protocols consumed by the API."""
