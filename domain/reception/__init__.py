"""Reception Bounded Context.

Responsible for who heard whom:
- Value Objects: Operator, ReceptionReport, ReportMatrix, MapMode
- Services: place_operators, OperatorDirectory, select_transmitters
"""
