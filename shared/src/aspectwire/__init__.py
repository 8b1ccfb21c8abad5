"""Shared configuration and schemas for the aspectwire services."""
