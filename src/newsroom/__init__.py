"""Newsroom: news classification, selection and publication."""
