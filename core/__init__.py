"""Commerce sync core: domain, application, data and infrastructure layers."""
