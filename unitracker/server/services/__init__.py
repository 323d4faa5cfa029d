"""Request dependencies and the services that sit between routers and repositories."""
