"""CDK stacks for website + API infrastructure."""

from .website_api_stack import WebsiteApiStack

__all__ = ["WebsiteApiStack"]
