"""SmartAttend package.

Organized by feature modules (batches, students, attendance, analytics,
insights) with a thin Flask controller layer over service/repository layers.
All persistence goes through a key-value ``RecordStore``.
"""
