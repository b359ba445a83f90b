"""Shop Payroll package.

Staff attendance and payroll administration for a multi-location shop
(Big Shop, Small Shop, Godown). Organized by feature modules (staff,
attendance, advances, payroll) with pure calculation code at the core,
repository Protocols around it and a thin Flask JSON layer on top.
"""
