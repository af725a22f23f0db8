"""
Request body parsing for the NinjaAPI.

Every JSON body this API accepts is an object. Anything else (a bare
string, array, number or null) is rejected here, before schema
validation; ninja turns the exception into a 400.
"""
from ninja.parser import Parser


class JSONObjectParser(Parser):

    def parse_body(self, request):
        data = super().parse_body(request)
        if not isinstance(data, dict):
            raise ValueError(f"Request body must be a JSON object, got {type(data).__name__}")
        return data
