from .uri_parser import HttpParser
from .uri_parser import RelativeReferenceParser
from .uri_parser import UriComponents
from .uri_parser import UriParser3986
