"""Clients for services the camping app talks to over the network."""
