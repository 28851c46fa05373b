"""L&F Digital: backend for the L&F Digital marketing site.

Serves the service catalogue, case studies and the AI-assisted tools
(service recommendations, case study generation, ROI projections, chat)
on top of an ordered fallback chain of completion providers.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
