"""Prassign: team roster, pull requests and automatic reviewer assignment."""
