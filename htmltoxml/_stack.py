class OpenElements(list):
    """Names of the elements whose start tags have been written but whose
    end tags have not, outermost first."""

    def push(self, name):
        self.append(name)

    def pop(self):
        if not self:
            raise IndexError("pop from an empty open element stack")
        return list.pop(self)

    def indexOf(self, name):
        """Return the index of the innermost open element called name, or -1."""
        for index in range(len(self) - 1, -1, -1):
            if self[index] == name:
                return index
        return -1
