API = "/api/v1"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ========== Departments ==========
def test_create_and_get_department(client, department):
    response = client.get(f"{API}/departments/{department['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Math"
    assert body["description"] == "Mathematics"
    assert "created_at" in body and "updated_at" in body


def test_get_missing_department_is_404(client):
    response = client.get(f"{API}/departments/999")
    assert response.status_code == 404
    assert response.json() == {"error": "department not found"}


def test_malformed_id_is_400(client):
    response = client.get(f"{API}/departments/abc")
    assert response.status_code == 400
    assert "error" in response.json()


def test_malformed_body_is_400(client):
    response = client.post(f"{API}/departments/", json={"name": "M"})
    assert response.status_code == 400
    response = client.post(f"{API}/departments/", json={"description": "no name"})
    assert response.status_code == 400


def test_list_departments_with_pagination(client):
    for name in ("Math", "Physics", "History"):
        client.post(f"{API}/departments/", json={"name": name})
    response = client.get(f"{API}/departments/", params={"limit": 2, "offset": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert body["limit"] == 2
    assert body["offset"] == 1
    assert [d["name"] for d in body["data"]] == ["Physics", "History"]


def test_search_departments(client, department):
    client.post(f"{API}/departments/", json={"name": "Physics"})
    response = client.get(f"{API}/departments/search", params={"q": "mat"})
    assert response.status_code == 200
    assert [d["name"] for d in response.json()["data"]] == ["Math"]


def test_search_departments_requires_query(client):
    assert client.get(f"{API}/departments/search").status_code == 400


def test_update_department_partial(client, department):
    response = client.put(f"{API}/departments/{department['id']}", json={"description": "Numbers"})
    assert response.status_code == 200
    assert response.json()["name"] == "Math"
    assert response.json()["description"] == "Numbers"


def test_delete_department(client, department):
    url = f"{API}/departments/{department['id']}"
    response = client.delete(url)
    assert response.status_code == 200
    assert response.json() == {"message": "department deleted successfully"}
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404


# ========== Teachers / Students ==========
def test_teacher_with_unknown_department_is_400(client):
    response = client.post(f"{API}/teachers/", json={
        "first_name": "Ann", "last_name": "Lee", "email": "ann@school.edu", "department_id": 42,
    })
    assert response.status_code == 400
    assert response.json() == {"error": "department not found"}


def test_teacher_duplicate_email_is_409(client, teacher, department):
    response = client.post(f"{API}/teachers/", json={
        "first_name": "Other", "last_name": "Doe", "email": teacher["email"],
        "department_id": department["id"],
    })
    assert response.status_code == 409
    assert "already exists" in response.json()["error"]


def test_teacher_invalid_email_is_400(client, department):
    response = client.post(f"{API}/teachers/", json={
        "first_name": "Ann", "last_name": "Lee", "email": "not-an-email", "department_id": department["id"],
    })
    assert response.status_code == 400


def test_teachers_by_department(client, teacher, department):
    response = client.get(f"{API}/teachers/department/{department['id']}")
    assert response.status_code == 200
    assert response.json()["count"] == 1
    assert response.json()["data"][0]["email"] == "jane.doe@school.edu"


def test_student_duplicate_email_is_409(client, student):
    response = client.post(f"{API}/students/", json={
        "first_name": "Johnny", "last_name": "Smith", "email": student["email"],
        "date_of_birth": "2005-04-12", "enrollment_date": "2023-09-01",
    })
    assert response.status_code == 409


def test_student_bad_date_is_400(client):
    response = client.post(f"{API}/students/", json={
        "first_name": "Bad", "last_name": "Date", "email": "bad@school.edu",
        "date_of_birth": "2005/04/12", "enrollment_date": "2023-09-01",
    })
    assert response.status_code == 400
    assert "date_of_birth" in response.json()["error"]


def test_student_email_reusable_after_delete(client, student):
    client.delete(f"{API}/students/{student['id']}")
    response = client.post(f"{API}/students/", json={
        "first_name": "John", "last_name": "Smith", "email": student["email"],
        "date_of_birth": "2005-04-12", "enrollment_date": "2023-09-01",
    })
    assert response.status_code == 201
    assert response.json()["id"] != student["id"]


def test_search_students(client, student):
    response = client.get(f"{API}/students/search", params={"q": "smi"})
    assert response.status_code == 200
    assert response.json()["count"] == 1


def test_students_enrolled_before(client, student):
    assert client.get(f"{API}/students/enrolled-before", params={"date": "2024-01-01"}).json()["count"] == 1
    assert client.get(f"{API}/students/enrolled-before", params={"date": "2023-09-01"}).json()["count"] == 0


# ========== Courses / Enrollments ==========
def test_course_with_unknown_teacher_is_not_persisted(client, department):
    response = client.post(f"{API}/courses/", json={
        "name": "Ghost", "code": "GH101", "credits": 3,
        "department_id": department["id"], "teacher_id": 77,
    })
    assert response.status_code == 400
    assert response.json() == {"error": "teacher not found"}
    assert client.get(f"{API}/courses/").json()["count"] == 0


def test_course_credits_out_of_range_is_400(client, department, teacher):
    response = client.post(f"{API}/courses/", json={
        "name": "Heavy", "code": "HV1", "credits": 9,
        "department_id": department["id"], "teacher_id": teacher["id"],
    })
    assert response.status_code == 400


def test_courses_by_teacher(client, course, teacher):
    response = client.get(f"{API}/courses/teacher/{teacher['id']}")
    assert [c["code"] for c in response.json()["data"]] == ["MATH101"]


def test_enrollment_scenario(client, student, course):
    payload = {"student_id": student["id"], "course_id": course["id"], "enrollment_date": "2024-01-10"}

    first = client.post(f"{API}/enrollments/", json=payload)
    assert first.status_code == 201

    again = client.post(f"{API}/enrollments/", json=payload)
    assert again.status_code == 409
    assert again.json() == {"error": "student already enrolled in this course"}

    by_student = client.get(f"{API}/enrollments/student/{student['id']}")
    assert by_student.status_code == 200
    assert by_student.json()["count"] == 1
    assert by_student.json()["data"][0]["id"] == first.json()["id"]


def test_unenroll(client, student, course):
    created = client.post(f"{API}/enrollments/", json={
        "student_id": student["id"], "course_id": course["id"], "enrollment_date": "2024-01-10",
    }).json()
    response = client.delete(f"{API}/enrollments/{created['id']}")
    assert response.status_code == 200
    assert client.get(f"{API}/enrollments/course/{course['id']}").json()["count"] == 0


# ========== Attendance ==========
def test_attendance_flow(client, student, course):
    response = client.post(f"{API}/attendance/", json={
        "student_id": student["id"], "course_id": course["id"], "date": "2024-03-04", "status": "late",
    })
    assert response.status_code == 201
    record = response.json()
    assert record["status"] == "late"
    assert record["date"] == "2024-03-04"

    response = client.put(f"{API}/attendance/{record['id']}", json={"status": "present"})
    assert response.status_code == 200
    assert response.json()["status"] == "present"

    in_range = client.get(f"{API}/attendance/range", params={"start": "2024-03-04", "end": "2024-03-04"})
    assert in_range.json()["count"] == 1
    outside = client.get(f"{API}/attendance/range", params={"start": "2024-03-05", "end": "2024-03-31"})
    assert outside.json()["count"] == 0

    pair = client.get(f"{API}/attendance/student/{student['id']}/course/{course['id']}")
    assert pair.json()["count"] == 1


def test_attendance_unknown_status_is_400(client, student, course):
    response = client.post(f"{API}/attendance/", json={
        "student_id": student["id"], "course_id": course["id"], "date": "2024-03-04", "status": "sick",
    })
    assert response.status_code == 400
    assert "status" in response.json()["error"]
    assert client.get(f"{API}/attendance/").json()["count"] == 0


# ========== Homework / Submissions ==========
def test_submission_scenario(client, student, homework):
    pair = {"student_id": student["id"], "homework_id": homework["id"]}

    missing = client.post(f"{API}/submissions/grade", json={**pair, "score": 92})
    assert missing.status_code == 404

    submitted = client.post(f"{API}/submissions/", json={**pair, "submission_date": "2099-04-30T18:00:00Z"})
    assert submitted.status_code == 201
    assert submitted.json()["status"] == "submitted"

    graded = client.post(f"{API}/submissions/grade", json={**pair, "score": 92})
    assert graded.status_code == 200
    assert graded.json()["status"] == "graded"
    assert graded.json()["score"] == 92
    assert graded.json()["id"] == submitted.json()["id"]

    again = client.post(f"{API}/submissions/", json=pair)
    assert again.status_code == 409
    assert again.json() == {"error": "homework already submitted"}


def test_grade_above_homework_max_is_400(client, student, homework):
    pair = {"student_id": student["id"], "homework_id": homework["id"]}
    client.post(f"{API}/submissions/", json=pair)
    assert client.post(f"{API}/submissions/grade", json={**pair, "score": 101}).status_code == 400


def test_upcoming_homework(client, homework):
    response = client.get(f"{API}/homework/upcoming")
    assert response.status_code == 200
    assert [h["id"] for h in response.json()["data"]] == [homework["id"]]
    assert client.get(f"{API}/homework/overdue").json()["count"] == 0


def test_homework_bad_due_date_is_400(client, course):
    response = client.post(f"{API}/homework/", json={
        "title": "Essay", "course_id": course["id"], "due_date": "2099-05-01", "max_score": 10,
    })
    assert response.status_code == 400


# ========== Exams / Grades ==========
def test_upcoming_exams_excludes_past(client, course, exam):
    client.post(f"{API}/exams/", json={
        "title": "Old final", "course_id": course["id"], "exam_date": "2001-06-01T09:00:00Z",
        "duration": 120, "max_score": 100,
    })
    response = client.get(f"{API}/exams/upcoming", params={"limit": 5})
    assert response.status_code == 200
    assert [e["title"] for e in response.json()["data"]] == ["Midterm"]


def test_update_exam_partial(client, exam):
    response = client.put(f"{API}/exams/{exam['id']}", json={"duration": 120})
    assert response.status_code == 200
    assert response.json()["duration"] == 120
    assert response.json()["title"] == "Midterm"


def test_grades_and_average(client, student, exam):
    empty = client.get(f"{API}/grades/student/{student['id']}/average")
    assert empty.status_code == 200
    assert empty.json() == {"student_id": student["id"], "average": 0}

    for score in (80, 90, 100):
        response = client.post(f"{API}/grades/", json={
            "student_id": student["id"], "exam_id": exam["id"], "score": score,
        })
        assert response.status_code == 201

    average = client.get(f"{API}/grades/student/{student['id']}/average")
    assert average.json()["average"] == 90
    assert client.get(f"{API}/grades/exam/{exam['id']}/average").json()["average"] == 90
    assert client.get(f"{API}/grades/exam/{exam['id']}").json()["count"] == 3


def test_grade_with_unknown_exam_is_400(client, student):
    response = client.post(f"{API}/grades/", json={"student_id": student["id"], "exam_id": 5, "score": 10})
    assert response.status_code == 400
    assert response.json() == {"error": "exam not found"}


# ========== Create -> get returns what was stored ==========
def assert_round_trip(client, resource, payload, expected=None):
    created = client.post(f"{API}/{resource}/", json=payload)
    assert created.status_code == 201, created.json()
    fetched = client.get(f"{API}/{resource}/{created.json()['id']}")
    assert fetched.status_code == 200
    body = fetched.json()
    assert body == created.json()
    for field, value in {**payload, **(expected or {})}.items():
        assert body[field] == value, field
    return body


def test_round_trip_department(client):
    assert_round_trip(client, "departments", {"name": "Physics", "description": None})


def test_round_trip_teacher(client, department):
    assert_round_trip(client, "teachers", {
        "first_name": "Ann", "last_name": "Lee", "email": "ann.lee@school.edu",
        "phone": "555-0101", "department_id": department["id"],
    })


def test_round_trip_student(client):
    assert_round_trip(client, "students", {
        "first_name": "Mia", "last_name": "Wong", "email": "mia@school.edu", "phone": None,
        "date_of_birth": "2006-02-28", "enrollment_date": "2024-09-01",
    })


def test_round_trip_course(client, department, teacher):
    assert_round_trip(client, "courses", {
        "name": "Algebra", "code": "MATH102", "description": "Linear algebra", "credits": 3,
        "department_id": department["id"], "teacher_id": teacher["id"],
    })


def test_round_trip_enrollment(client, student, course):
    assert_round_trip(client, "enrollments", {
        "student_id": student["id"], "course_id": course["id"], "enrollment_date": "2024-01-10",
    })


def test_round_trip_attendance(client, student, course):
    assert_round_trip(client, "attendance", {
        "student_id": student["id"], "course_id": course["id"], "date": "2024-03-04", "status": "absent",
    })


def test_round_trip_homework(client, course):
    assert_round_trip(client, "homework", {
        "title": "Proofs", "description": None, "course_id": course["id"],
        "due_date": "2099-06-01T12:30:00Z", "max_score": 50,
    })


def test_round_trip_submission(client, student, homework):
    body = assert_round_trip(client, "submissions", {
        "student_id": student["id"], "homework_id": homework["id"],
        "submission_date": "2099-04-30T18:00:00Z",
    }, expected={"status": "submitted", "score": None})
    assert body["submission_date"] == "2099-04-30T18:00:00Z"


def test_round_trip_exam(client, course):
    assert_round_trip(client, "exams", {
        "title": "Final", "course_id": course["id"], "exam_date": "2099-06-20T09:00:00.250000Z",
        "duration": 180, "max_score": 200,
    })


def test_round_trip_grade(client, student, exam):
    assert_round_trip(client, "grades", {"student_id": student["id"], "exam_id": exam["id"], "score": 77.5})


# ========== Timestamps on the wire ==========
def test_timestamps_are_returned_in_utc_with_offset(client, course):
    created = client.post(f"{API}/exams/", json={
        "title": "Final", "course_id": course["id"], "exam_date": "2099-03-15T09:00:00+02:00",
        "duration": 120, "max_score": 100,
    }).json()
    assert created["exam_date"] == "2099-03-15T07:00:00Z"
    assert created["created_at"].endswith("Z")
    assert created["updated_at"].endswith("Z")


def test_exam_date_from_get_is_accepted_by_put(client, exam):
    url = f"{API}/exams/{exam['id']}"
    fetched = client.get(url).json()

    response = client.put(url, json={"exam_date": fetched["exam_date"]})
    assert response.status_code == 200
    assert response.json()["exam_date"] == fetched["exam_date"]


def test_due_date_from_get_is_accepted_by_put(client, homework):
    url = f"{API}/homework/{homework['id']}"
    fetched = client.get(url).json()

    response = client.put(url, json={"due_date": fetched["due_date"]})
    assert response.status_code == 200
    assert response.json()["due_date"] == "2099-05-01T23:59:00Z"


def test_non_rfc3339_exam_date_is_400(client, course):
    response = client.post(f"{API}/exams/", json={
        "title": "Final", "course_id": course["id"], "exam_date": "20990315T090000Z",
        "duration": 120, "max_score": 100,
    })
    assert response.status_code == 400
    assert "exam_date" in response.json()["error"]


# ========== Emails are stored as sent ==========
def test_email_case_is_preserved(client, department):
    body = assert_round_trip(client, "teachers", {
        "first_name": "Ann", "last_name": "Lee", "email": "Ann.Lee@School.EDU",
        "department_id": department["id"],
    })
    assert body["email"] == "Ann.Lee@School.EDU"


def test_email_uniqueness_is_case_sensitive(client, student):
    response = client.post(f"{API}/students/", json={
        "first_name": "John", "last_name": "Smith", "email": "John.Smith@School.edu",
        "date_of_birth": "2005-04-12", "enrollment_date": "2023-09-01",
    })
    assert response.status_code == 201
    assert response.json()["email"] == "John.Smith@School.edu"
