"""Locate files by name across directory trees and nested ZIP/JAR/EAR/WAR archives."""

__version__ = "0.1.0"
