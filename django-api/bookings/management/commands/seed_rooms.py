from django.core.management.base import BaseCommand
from django.db import transaction

from bookings.domain import Capacity, NewRoom, RoomType
from bookings.stores.django_store import DjangoRoomStore

SAMPLE_ROOMS = [
    # Classrooms
    NewRoom(
        name="Classroom A-101",
        room_type=RoomType.CLASSROOM,
        capacity=Capacity(40),
        facilities=("projector", "whiteboard", "sound system"),
        description="Large classroom with modern AV equipment",
    ),
    NewRoom(
        name="Classroom A-102",
        room_type=RoomType.CLASSROOM,
        capacity=Capacity(30),
        facilities=("projector", "whiteboard"),
        description="Medium-sized classroom",
    ),
    NewRoom(
        name="Classroom B-201",
        room_type=RoomType.CLASSROOM,
        capacity=Capacity(50),
        facilities=("projector", "whiteboard", "computers", "sound system"),
        description="Large lecture hall with computer stations",
    ),
    NewRoom(
        name="Classroom C-301",
        room_type=RoomType.CLASSROOM,
        capacity=Capacity(25),
        facilities=("projector", "whiteboard"),
        description="Small classroom for seminars",
    ),
    # Labs
    NewRoom(
        name="Computer Lab 1",
        room_type=RoomType.LAB,
        capacity=Capacity(30),
        facilities=("computers", "projector", "network access"),
        description="Computer lab with 30 workstations",
    ),
    NewRoom(
        name="Computer Lab 2",
        room_type=RoomType.LAB,
        capacity=Capacity(25),
        facilities=("computers", "projector", "network access", "3D printers"),
        description="Advanced computer lab with 3D printing facilities",
    ),
    NewRoom(
        name="Chemistry Lab",
        room_type=RoomType.LAB,
        capacity=Capacity(20),
        facilities=("lab equipment", "safety equipment", "fume hoods"),
        description="Fully equipped chemistry laboratory",
    ),
    NewRoom(
        name="Physics Lab",
        room_type=RoomType.LAB,
        capacity=Capacity(24),
        facilities=("lab equipment", "projector", "measurement tools"),
        description="Physics laboratory with modern equipment",
    ),
    NewRoom(
        name="Engineering Lab",
        room_type=RoomType.LAB,
        capacity=Capacity(18),
        facilities=("3D printers", "CNC machines", "tools", "computers"),
        description="Engineering lab with prototyping equipment",
    ),
]


class Command(BaseCommand):
    help = "Adds the sample classrooms and labs; rooms that already exist are skipped"

    def handle(self, *args, **kwargs):
        store = DjangoRoomStore()
        added = skipped = 0

        with transaction.atomic():
            for room in SAMPLE_ROOMS:
                if store.get_room_by_name(room.name) is not None:
                    self.stdout.write(f"   Skipped: {room.name} (already exists)")
                    skipped += 1
                    continue
                created = store.create_room(room)
                self.stdout.write(
                    f"   Added: {created.name} ({created.room_type.value}, "
                    f"capacity: {created.capacity.value})"
                )
                added += 1

        total = len(store.list_rooms())
        self.stdout.write(
            self.style.SUCCESS(f"Added {added}, skipped {skipped}, {total} room(s) in database")
        )
