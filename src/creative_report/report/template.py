# Placeholders: {prs}, {month}, {percent_creative}, {last_day_of_month}
TEMPLATE = """
---
title: "Formularz rejestracji czasu pracy twórczej"
author: "JetBrains Poland sp. z o.o."
date: "{last_day_of_month}"
geometry: a4paper,landscape,margin=2cm
fontsize: 10pt
mainfont: DejaVu Serif
lang: pl-PL
---

Warszawa, {last_day_of_month}

# Formularz rejestracji czasu pracy twórczej i Utworów w JetBrains Poland spółka z ograniczoną odpowiedzialnością / Registration form for creative time and Works at JetBrains Poland spółka z ograniczoną odpowiedzialnością

## Dotyczy miesiąca / Concerns the month of: {month}

| Lp. | Utwór / Work | Autor / Author | Forma ustalenia / Form of the Work’s establishment | Status | Data powstania / Date of creation |
| --- | ----------------------------------------------- | ------------------- | ------------------------ | ---------------- | -------------------- |
{prs}

### Total % of actual working time spent by creative time: {percent_creative}%


## Oświadczenie Pracownika

Niniejszym potwierdzam, że według mojej najlepszej wiedzy wskazany/e wyżej utwór/utwory stanowi/ą wynik mojej działalności twórczej o indywidualnym charakterze chroniony/e przepisami ustawy z dnia 4 lutego 1994 r. O prawie autorskim i prawach pokrewnych (t.j.: Dz.U. z 2022 r., poz. 2509). Ponadto oświadczam, że w miesiącu, którego dotyczy to oświadczenie mój czas pracy kreatywnej nad tworzeniem ww. Utworu/Utworów w stosunku do całego efektywnego czasu pracy (z wyłączeniem nieobecności w pracy) wyniósł {percent_creative} procent.

## Employee’s declaration

I hereby declare that, to my best knowledge, this (these) work(s) is (are) the result of my creative activity of an individual character protected by the provisions of the Act of 4 February 1994 on Copyright and Related Rights (consolidated text: Journal of Laws of 2022, item 2509). I also declare that, in the month which this declaration concerns, I have worked creatively on creating the above Work(s) for {percent_creative} percent of the entire effective working time (i.e., excluding absences at work).
"""
