"""Libraries of functions shared by the clients."""
