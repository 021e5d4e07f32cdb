from app import create_app
from app.extensions import get_service

app = create_app()

with app.app_context():
    document = get_service('classrooms').document

    # Create Classrooms
    rooms_data = [
        {"id": 1, "name": "1101", "building": "1号館", "capacity": 120, "status": "空き", "tags": ["プロジェクター", "マイク"]},
        {"id": 2, "name": "1102", "building": "1号館", "capacity": 60, "status": "授業中", "tags": ["プロジェクター"]},
        {"id": 3, "name": "2201", "building": "2号館", "capacity": 40, "status": "空き", "tags": ["コンセント"]},
        {"id": 4, "name": "2202", "building": "2号館", "status": "空き", "tags": []},
        {"id": 7, "name": "3301", "building": "3号館", "capacity": 200, "status": "授業中", "tags": ["プロジェクター", "マイク", "コンセント"]}
    ]

    existing = document.load()
    known_ids = {r.get('id') for r in existing if isinstance(r, dict)}

    for r_data in rooms_data:
        if r_data['id'] not in known_ids:
            existing.append(r_data)
            print(f"Classroom {r_data['name']} created.")

    document.save(existing)
    print("Classrooms seeded successfully.")
