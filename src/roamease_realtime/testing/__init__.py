"""Testing – fakes for exercising the realtime core without network or Redis."""
