"""v1 router package — all /api/v1/* endpoints live here.

Files:
  materials.py  — suppliers listed / counted by material
  suppliers.py  — supplier count by bank address
  receipts.py   — goods-in receipt creation

Rule: Routers only handle HTTP (request parsing, response shaping).
      All SQL lives in warehouse_api/repositories/.
"""

from fastapi import APIRouter

from warehouse_api.routers.v1.materials import router as materials_router
from warehouse_api.routers.v1.receipts import router as receipts_router
from warehouse_api.routers.v1.suppliers import router as suppliers_router

router = APIRouter()
router.include_router(materials_router)
router.include_router(suppliers_router)
router.include_router(receipts_router)
