class Plane:
    """
    Data Transfer Object for Plane Entity.
    """
    def __init__(self, plane_id, make, model, year, last_repair_date=None):
        self.plane_id = plane_id
        self.make = make
        self.model = model
        self.year = year
        self.last_repair_date = last_repair_date

    def age(self, current_year):
        return current_year - self.year

    @classmethod
    def from_row(cls, row):
        return cls(
            plane_id=row['PlaneID'],
            make=row['Make'],
            model=row['Model'],
            year=int(row['Year']),
            last_repair_date=row['LastRepairDate'],
        )
