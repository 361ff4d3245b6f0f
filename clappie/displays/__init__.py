"""Built-in utility and demo screens and the view registry."""